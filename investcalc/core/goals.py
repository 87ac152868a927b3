"""Goal-seeking calculations."""

from __future__ import annotations

from investcalc.core.schedule import aggregate_by_year, simulate_growth
from investcalc.schemas.common import percent_to_decimal
from investcalc.schemas.goals import (
    GoalPlanningRequest,
    GoalPlanningResult,
    RetirementCorpusRequest,
    RetirementCorpusResult,
)


def required_periodic_payment(target: float, present_value: float, periodic_rate: float, periods: int) -> float:
    """
    Contribution per period (paid at period end) needed to grow present_value to target.

    Never negative: if present_value alone already reaches the target, the
    required contribution is zero.
    """
    if periodic_rate == 0:
        payment = (target - present_value) / periods
    else:
        growth = (1 + periodic_rate) ** periods
        payment = (target - present_value * growth) / ((growth - 1) / periodic_rate)
    return max(payment, 0.0)


def calculate_goal_plan(request: GoalPlanningRequest) -> GoalPlanningResult:
    monthly_rate = percent_to_decimal(request.annual_rate) / 12
    months = round(request.years * 12)

    payment = required_periodic_payment(request.target_amount, request.initial_investment, monthly_rate, months)
    periods = simulate_growth(request.initial_investment, monthly_rate, months, contribution=payment)

    return GoalPlanningResult(
        required_monthly_investment=payment,
        total_contributions=request.initial_investment + payment * months,
        projected_value=periods[-1].closing_balance,
        goal_already_met=payment == 0.0,
        annual_breakdown=aggregate_by_year(periods, 12),
    )


def calculate_retirement_corpus(request: RetirementCorpusRequest) -> RetirementCorpusResult:
    """
    Corpus = present value of the retirement expenses at the real rate of return.

    Real rate is approximated as return minus inflation; at or below zero the
    corpus is simply expenses times years.
    """
    annual_expenses = request.monthly_expenses_at_retirement * 12
    years = request.years_in_retirement
    real_rate = percent_to_decimal(request.return_rate - request.inflation_rate)

    if real_rate <= 0:
        corpus = annual_expenses * years
    else:
        corpus = annual_expenses * (1 - (1 + real_rate) ** -years) / real_rate

    return RetirementCorpusResult(
        required_corpus=corpus,
        annual_expenses=annual_expenses,
        real_return_rate=real_rate * 100,
        years_to_retirement=request.retirement_age - request.current_age,
        years_in_retirement=years,
    )
