"""
Depletion-aware payout simulations (SWP and annuities).

The schedule is walked period by period: an insolvent plan ends with a zero
balance and a recorded depletion point, never a negative balance.

Depletion convention: the depletion period is the first period whose closing
balance reaches zero, and the depletion year is the year *during which* that
happens (never "at the start of the following year"). A fund exhausted by its
final scheduled payment is therefore depleted in the last year of the term.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from investcalc.core.schedule import aggregate_by_year
from investcalc.schemas.common import PeriodDataPoint, percent_to_decimal
from investcalc.schemas.depletion import (
    AnnuityRequest,
    AnnuityResult,
    SwpRequest,
    SwpResult,
)

# Balances below half a cent count as exhausted; for large principals the
# floor is 1e-9 of the principal.
DEPLETION_TOLERANCE = 0.005
RELATIVE_TOLERANCE = 1e-9


def depletion_tolerance(principal: float) -> float:
    return max(DEPLETION_TOLERANCE, abs(principal) * RELATIVE_TOLERANCE)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def describe_months(months: int) -> str:
    """'1 year and 8 months', '2 years', '5 months'."""
    years, remainder = divmod(months, 12)
    parts = []
    if years:
        parts.append(_plural(years, "year"))
    if remainder or not parts:
        parts.append(_plural(remainder, "month"))
    return " and ".join(parts)


@dataclass
class DepletionSchedule:
    periods: List[PeriodDataPoint]
    periods_per_year: int
    depletion_period: Optional[int]

    @property
    def total_paid(self) -> float:
        return sum(row.withdrawal for row in self.periods)

    @property
    def total_growth(self) -> float:
        return sum(row.growth for row in self.periods)

    @property
    def final_balance(self) -> float:
        return self.periods[-1].closing_balance if self.periods else 0.0

    @property
    def depletion_year(self) -> Optional[int]:
        if self.depletion_period is None:
            return None
        return math.ceil(self.depletion_period / self.periods_per_year)

    def annual_breakdown(self) -> List[PeriodDataPoint]:
        return aggregate_by_year(self.periods, self.periods_per_year)


def simulate_depletion(
    principal: float,
    periodic_rate: float,
    payment: float,
    years: int,
    periods_per_year: int,
) -> DepletionSchedule:
    """
    Each period: accrue interest on the balance, then pay min(payment, balance).
    Once depleted, every later period reports zero interest and zero payment.
    """
    balance = float(principal)
    tolerance = depletion_tolerance(principal)
    depletion_period: Optional[int] = None
    rows: List[PeriodDataPoint] = []

    for period in range(1, years * periods_per_year + 1):
        if depletion_period is not None:
            rows.append(PeriodDataPoint(period=period, opening_balance=0.0, closing_balance=0.0))
            continue

        opening = balance
        interest = balance * periodic_rate
        balance += interest
        paid = min(payment, balance)
        balance -= paid

        if balance <= tolerance:
            balance = 0.0
            depletion_period = period

        rows.append(
            PeriodDataPoint(
                period=period,
                opening_balance=opening,
                growth=interest,
                withdrawal=paid,
                closing_balance=balance,
            )
        )

    return DepletionSchedule(periods=rows, periods_per_year=periods_per_year, depletion_period=depletion_period)


def remaining_balance(principal: float, periodic_rate: float, periods: int, elapsed: int) -> float:
    """Balance of a level-payment loan after ``elapsed`` of ``periods`` payments."""
    remaining = periods - elapsed
    if periodic_rate == 0:
        return principal * remaining / periods
    log_growth = math.log1p(periodic_rate)
    return principal * math.expm1(-remaining * log_growth) / math.expm1(-periods * log_growth)


def amortize(principal: float, periodic_rate: float, years: int, periods_per_year: int) -> DepletionSchedule:
    """
    Level-payment payout schedule built from the closed-form balance.

    Matches simulate_depletion with annuity_payment under exact arithmetic.
    Each closing balance is computed directly, and the last one is exactly zero.
    """
    periods = years * periods_per_year
    rows: List[PeriodDataPoint] = []
    opening = float(principal)

    for period in range(1, periods + 1):
        closing = remaining_balance(principal, periodic_rate, periods, period)
        interest = opening * periodic_rate
        rows.append(
            PeriodDataPoint(
                period=period,
                opening_balance=opening,
                growth=interest,
                withdrawal=opening + interest - closing,
                closing_balance=closing,
            )
        )
        opening = closing

    return DepletionSchedule(periods=rows, periods_per_year=periods_per_year, depletion_period=periods)


def annuity_payment(principal: float, periodic_rate: float, periods: int) -> float:
    """Level payment that amortizes principal to zero over the given periods."""
    if periodic_rate == 0:
        return principal / periods
    # P * r / (1 - (1 + r) ** -n), with the denominator kept precise for small r
    return principal * periodic_rate / -math.expm1(-periods * math.log1p(periodic_rate))


def calculate_swp(request: SwpRequest) -> SwpResult:
    schedule = simulate_depletion(
        principal=request.initial_investment,
        periodic_rate=percent_to_decimal(request.annual_rate) / 12,
        payment=request.monthly_withdrawal,
        years=request.years,
        periods_per_year=12,
    )

    message = None
    if schedule.depletion_period is not None:
        message = (
            "The corpus is projected to deplete in approximately "
            f"{describe_months(schedule.depletion_period)}."
        )

    return SwpResult(
        total_withdrawn=schedule.total_paid,
        total_growth=schedule.total_growth,
        final_balance=schedule.final_balance,
        depleted=schedule.depletion_period is not None,
        depletion_month=schedule.depletion_period,
        depletion_year=schedule.depletion_year,
        message=message,
        annual_breakdown=schedule.annual_breakdown(),
    )


def calculate_annuity(request: AnnuityRequest) -> AnnuityResult:
    per_year = request.payment_frequency.periods_per_year
    periodic_rate = percent_to_decimal(request.annual_rate) / per_year
    payment = annuity_payment(request.principal, periodic_rate, request.years * per_year)

    schedule = amortize(request.principal, periodic_rate, request.years, per_year)

    return AnnuityResult(
        periodic_payment=payment,
        total_payments=schedule.total_paid,
        total_interest=schedule.total_growth,
        corpus_depletion_year=schedule.depletion_year,
        annual_breakdown=schedule.annual_breakdown(),
    )
