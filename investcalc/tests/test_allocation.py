from __future__ import annotations

import math

import pytest

from investcalc.core.allocation import (
    allocate_percentages,
    calculate_global_allocation,
    calculate_portfolio_allocation,
)
from investcalc.errors import CalculatorInputError
from investcalc.schemas.allocation import GlobalAllocationRequest, PortfolioAllocationRequest


def test_full_global_allocation_is_accepted_without_remainder():
    request = GlobalAllocationRequest(north_america=60, europe=20, asia_pacific=10, emerging_markets=10)
    result = calculate_global_allocation(request)

    assert [item.name for item in result.slices] == ["North America", "Europe", "Asia-Pacific", "Emerging Markets"]
    assert result.total_percentage == 100
    assert result.unallocated_percentage == 0
    assert result.note is None


def test_partial_allocation_reports_unallocated_remainder():
    result = allocate_percentages({"Stocks": 30, "Bonds": 20})

    assert result.unallocated_percentage == 50
    assert result.note == "50.00% of the portfolio is unallocated."


def test_allocation_over_one_hundred_percent_is_a_field_error():
    request = GlobalAllocationRequest(north_america=70, europe=20, asia_pacific=10, emerging_markets=10)

    with pytest.raises(CalculatorInputError) as excinfo:
        calculate_global_allocation(request)

    assert excinfo.value.to_detail() == [
        {"loc": ["north_america"], "msg": "Total allocation cannot exceed 100%.", "type": "value_error"}
    ]


def test_portfolio_allocation_converts_values_to_percentages():
    result = calculate_portfolio_allocation(PortfolioAllocationRequest())
    by_name = {item.name: item for item in result.slices}

    assert "Real Estate" not in by_name
    assert math.isclose(by_name["Stocks"].percentage, 50.0)
    assert math.isclose(sum(item.percentage for item in result.slices), 100.0)
    assert result.total_value == 10_000


def test_empty_portfolio_is_rejected():
    request = PortfolioAllocationRequest(stocks=0, bonds=0, crypto=0, real_estate=0, cash=0)

    with pytest.raises(CalculatorInputError) as excinfo:
        calculate_portfolio_allocation(request)

    assert excinfo.value.errors[0][0] == "stocks"
