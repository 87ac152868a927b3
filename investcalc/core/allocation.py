"""Percentage and value based allocation breakdowns."""

from __future__ import annotations

from typing import Mapping

from investcalc.errors import CalculatorInputError
from investcalc.schemas.allocation import (
    AllocationBreakdown,
    AllocationSlice,
    GlobalAllocationRequest,
    PortfolioAllocationRequest,
)

FULL_ALLOCATION = 100.0
_SUM_TOLERANCE = 1e-9


def allocate_percentages(entries: Mapping[str, float], error_field: str = "allocations") -> AllocationBreakdown:
    """
    Turn named percentages into slices.

    A total above 100% is rejected as a field error; a total below 100% is
    accepted and the remainder is reported as unallocated.
    """
    total = sum(entries.values())
    if total > FULL_ALLOCATION + _SUM_TOLERANCE:
        raise CalculatorInputError.for_field(error_field, "Total allocation cannot exceed 100%.")

    slices = [
        AllocationSlice(name=name, percentage=percentage)
        for name, percentage in entries.items()
        if percentage > 0
    ]
    remainder = max(FULL_ALLOCATION - total, 0.0)

    note = None
    if remainder > _SUM_TOLERANCE:
        note = f"{remainder:.2f}% of the portfolio is unallocated."

    return AllocationBreakdown(
        slices=slices,
        total_percentage=total,
        unallocated_percentage=remainder if note else 0.0,
        note=note,
    )


def allocate_values(entries: Mapping[str, float], error_field: str = "allocations") -> AllocationBreakdown:
    """Each non-zero value becomes a slice worth value / total * 100 percent."""
    holdings = {name: value for name, value in entries.items() if value > 0}
    total_value = sum(holdings.values())
    if total_value <= 0:
        raise CalculatorInputError.for_field(
            error_field, "At least one asset class must have a value greater than 0."
        )

    slices = [
        AllocationSlice(name=name, value=value, percentage=value / total_value * 100)
        for name, value in holdings.items()
    ]
    return AllocationBreakdown(
        slices=slices,
        total_percentage=sum(item.percentage for item in slices),
        total_value=total_value,
    )


def calculate_global_allocation(request: GlobalAllocationRequest) -> AllocationBreakdown:
    return allocate_percentages(request.labelled(), error_field="north_america")


def calculate_portfolio_allocation(request: PortfolioAllocationRequest) -> AllocationBreakdown:
    return allocate_values(request.labelled(), error_field="stocks")
