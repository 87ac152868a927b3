"""Ratio and two-scenario comparison calculators."""

from __future__ import annotations

import math
from typing import List

from investcalc.core.currency import format_money
from investcalc.core.growth import future_value_lump_sum
from investcalc.schemas.common import percent_to_decimal
from investcalc.schemas.comparisons import (
    BearMarketSurvivalRequest,
    BearMarketSurvivalResult,
    LoanVsInvestmentRequest,
    LoanVsInvestmentResult,
    LoanVsInvestmentRow,
    MarketTimingCostRequest,
    MarketTimingCostResult,
    RiskRewardRequest,
    RiskRewardResult,
)


def calculate_risk_reward(request: RiskRewardRequest) -> RiskRewardResult:
    ratio = request.potential_profit / request.potential_loss

    if ratio >= 2:
        guidance = "Favourable: the potential reward is at least twice the risk taken."
    elif ratio >= 1:
        guidance = "Balanced: the potential reward covers the risk, but with little margin."
    else:
        guidance = "Unfavourable: the potential loss is larger than the potential reward."

    return RiskRewardResult(ratio=ratio, display=f"1 : {ratio:.2f}", guidance=guidance)


def recovery_needed_pct(drawdown: float) -> float:
    """Gain (percent) needed to get back to the peak after a fractional drawdown."""
    return (1 / (1 - drawdown) - 1) * 100


def calculate_bear_market_survival(request: BearMarketSurvivalRequest) -> BearMarketSurvivalResult:
    drawdown = percent_to_decimal(request.drawdown)
    value_after = request.portfolio_value * (1 - drawdown)
    needed = recovery_needed_pct(drawdown)

    years_to_recover = None
    if request.recovery_rate is not None:
        rate = percent_to_decimal(request.recovery_rate)
        years_to_recover = math.log(1 / (1 - drawdown)) / math.log(1 + rate)

    guidance = (
        f"A {request.drawdown:.2f}% fall needs a {needed:.2f}% gain to get back to the previous peak."
    )
    if years_to_recover is not None:
        guidance += f" At {request.recovery_rate:.2f}% a year that takes about {years_to_recover:.1f} years."

    return BearMarketSurvivalResult(
        value_after_drawdown=value_after,
        loss_amount=request.portfolio_value - value_after,
        recovery_needed_pct=needed,
        years_to_recover=years_to_recover,
        guidance=guidance,
    )


def calculate_loan_vs_investment(request: LoanVsInvestmentRequest) -> LoanVsInvestmentResult:
    """
    Investment compounds annually; the loan accrues simple interest on the
    original principal. Net benefit = investment gain - loan interest.
    """
    principal = request.principal
    invest_rate = percent_to_decimal(request.investment_rate)
    loan_rate = percent_to_decimal(request.loan_rate)

    rows: List[LoanVsInvestmentRow] = []
    for year in range(1, request.years + 1):
        investment_value = future_value_lump_sum(principal, invest_rate, year)
        loan_interest = principal * loan_rate * year
        rows.append(
            LoanVsInvestmentRow(
                year=year,
                investment_value=investment_value,
                cumulative_loan_interest=loan_interest,
                net_benefit=investment_value - principal - loan_interest,
            )
        )

    final = rows[-1]
    net = final.net_benefit
    amount = format_money(net, request.currency)
    if round(net, 2) > 0:
        guidance = (
            f"Investing appears more beneficial by {amount} over {request.years} years "
            "(investment compounds, loan interest is simple on the original principal)."
        )
    elif round(net, 2) < 0:
        guidance = (
            f"Paying off the loan appears more beneficial. Investing would leave a net position of "
            f"{amount} after {request.years} years, considering simple loan interest."
        )
    else:
        guidance = "The outcomes are roughly similar based on these simplified calculations."

    return LoanVsInvestmentResult(
        final_investment_value=final.investment_value,
        final_loan_interest=final.cumulative_loan_interest,
        net_benefit=net,
        guidance=guidance,
        annual_breakdown=rows,
    )


def calculate_market_timing_cost(request: MarketTimingCostRequest) -> MarketTimingCostResult:
    invested = future_value_lump_sum(request.initial_investment, percent_to_decimal(request.market_return), request.years)
    missed = future_value_lump_sum(
        request.initial_investment, percent_to_decimal(request.missed_days_return), request.years
    )
    cost = invested - missed

    return MarketTimingCostResult(
        value_if_invested=invested,
        value_if_best_days_missed=missed,
        opportunity_cost=cost,
        opportunity_cost_pct=cost / invested * 100 if invested else 0.0,
    )
