"""Closed-form growth calculations: lump sums, SIPs and time value of money."""

from __future__ import annotations

from typing import List

from investcalc.core.schedule import aggregate_by_year, simulate_growth
from investcalc.schemas.common import PeriodDataPoint, percent_to_decimal
from investcalc.schemas.growth import (
    CompoundInterestRequest,
    CompoundInterestResult,
    SipRequest,
    SipResult,
    SipVsLumpsumRequest,
    SipVsLumpsumResult,
    TimeValueOfMoneyRequest,
    TimeValueOfMoneyResult,
)

MONTHS_PER_YEAR = 12


def future_value_lump_sum(principal: float, annual_rate: float, years: float, periods_per_year: int = 1) -> float:
    """FV = P * (1 + r/f)^(f*n), with r as a decimal."""
    return principal * (1 + annual_rate / periods_per_year) ** (periods_per_year * years)


def future_value_ordinary_annuity(payment: float, periodic_rate: float, periods: int) -> float:
    """Contributions at the end of each period."""
    if periodic_rate == 0:
        return payment * periods
    return payment * ((1 + periodic_rate) ** periods - 1) / periodic_rate


def future_value_annuity_due(payment: float, periodic_rate: float, periods: int) -> float:
    """Contributions at the start of each period."""
    if periodic_rate == 0:
        return payment * periods
    return future_value_ordinary_annuity(payment, periodic_rate, periods) * (1 + periodic_rate)


def calculate_compound_interest(request: CompoundInterestRequest) -> CompoundInterestResult:
    per_year = request.compounding.periods_per_year
    annual_rate = percent_to_decimal(request.annual_rate)

    future_value = future_value_lump_sum(request.principal, annual_rate, request.years, per_year)
    periods = simulate_growth(request.principal, annual_rate / per_year, per_year * request.years)

    return CompoundInterestResult(
        future_value=future_value,
        total_invested=request.principal,
        total_interest=future_value - request.principal,
        annual_breakdown=aggregate_by_year(periods, per_year),
    )


def calculate_sip(request: SipRequest) -> SipResult:
    monthly_rate = percent_to_decimal(request.annual_rate) / MONTHS_PER_YEAR
    months = request.years * MONTHS_PER_YEAR

    future_value = future_value_annuity_due(request.monthly_investment, monthly_rate, months)
    total_invested = request.monthly_investment * months
    periods = simulate_growth(
        0.0,
        monthly_rate,
        months,
        contribution=request.monthly_investment,
        contribute_at_start=True,
    )

    return SipResult(
        total_invested=total_invested,
        estimated_returns=future_value - total_invested,
        future_value=future_value,
        annual_breakdown=aggregate_by_year(periods, MONTHS_PER_YEAR),
    )


def calculate_sip_vs_lumpsum(request: SipVsLumpsumRequest) -> SipVsLumpsumResult:
    """Same total either invested on day one (compounded yearly) or spread monthly."""
    annual_rate = percent_to_decimal(request.annual_rate)
    months = request.years * MONTHS_PER_YEAR

    lumpsum_value = future_value_lump_sum(request.total_investment, annual_rate, request.years)
    sip_monthly = request.total_investment / months
    sip_value = future_value_annuity_due(sip_monthly, annual_rate / MONTHS_PER_YEAR, months)

    difference = lumpsum_value - sip_value
    if abs(difference) < 0.005:
        better = "equal"
    elif difference > 0:
        better = "lumpsum"
    else:
        better = "sip"

    return SipVsLumpsumResult(
        total_invested=request.total_investment,
        lumpsum_future_value=lumpsum_value,
        sip_monthly_investment=sip_monthly,
        sip_future_value=sip_value,
        difference=difference,
        better_strategy=better,
    )


def calculate_time_value_of_money(request: TimeValueOfMoneyRequest) -> TimeValueOfMoneyResult:
    rate = percent_to_decimal(request.rate)

    if request.calculation_type == "FV":
        label = "Future Value (FV)"
        start = request.value
        calculated = future_value_lump_sum(start, rate, request.periods)
    else:
        # the breakdown shows the PV growing into the requested FV
        label = "Present Value (PV)"
        start = request.value / (1 + rate) ** request.periods
        calculated = start

    breakdown: List[PeriodDataPoint] = simulate_growth(start, rate, request.periods)
    return TimeValueOfMoneyResult(calculated_value=calculated, label=label, periodic_breakdown=breakdown)
