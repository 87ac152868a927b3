from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from investcalc.core.comparisons import (
    calculate_bear_market_survival,
    calculate_loan_vs_investment,
    calculate_market_timing_cost,
    calculate_risk_reward,
)
from investcalc.schemas.comparisons import (
    BearMarketSurvivalRequest,
    LoanVsInvestmentRequest,
    MarketTimingCostRequest,
    RiskRewardRequest,
)


def test_risk_reward_ratio_display():
    result = calculate_risk_reward(RiskRewardRequest(potential_profit=30, potential_loss=10))

    assert math.isclose(result.ratio, 3.0)
    assert result.display == "1 : 3.00"
    assert result.guidance.startswith("Favourable")


def test_risk_reward_unfavourable_when_loss_exceeds_profit():
    result = calculate_risk_reward(RiskRewardRequest(potential_profit=5, potential_loss=10))

    assert result.display == "1 : 0.50"
    assert result.guidance.startswith("Unfavourable")


def test_bear_market_half_drawdown_needs_a_double():
    result = calculate_bear_market_survival(BearMarketSurvivalRequest(portfolio_value=100_000, drawdown=50))

    assert math.isclose(result.value_after_drawdown, 50_000)
    assert math.isclose(result.loss_amount, 50_000)
    assert math.isclose(result.recovery_needed_pct, 100.0)
    assert result.years_to_recover is None


def test_bear_market_recovery_time_from_rate():
    result = calculate_bear_market_survival(
        BearMarketSurvivalRequest(portfolio_value=100_000, drawdown=50, recovery_rate=100)
    )

    assert math.isclose(result.years_to_recover, 1.0)
    assert "about 1.0 years" in result.guidance


def test_bear_market_rejects_total_loss():
    with pytest.raises(ValidationError):
        BearMarketSurvivalRequest(drawdown=100)


def test_loan_vs_investment_prefers_investing_when_returns_beat_loan_interest():
    result = calculate_loan_vs_investment(
        LoanVsInvestmentRequest(principal=10_000, loan_rate=5, investment_rate=7, years=5)
    )

    assert math.isclose(result.final_investment_value, 10_000 * 1.07**5, rel_tol=1e-12)
    assert math.isclose(result.final_loan_interest, 2500)
    assert math.isclose(result.net_benefit, 10_000 * 1.07**5 - 12_500, rel_tol=1e-12)
    assert result.guidance.startswith("Investing appears more beneficial by $1,525.52")
    assert [row.year for row in result.annual_breakdown] == [1, 2, 3, 4, 5]


def test_loan_vs_investment_guidance_uses_selected_currency():
    result = calculate_loan_vs_investment(
        LoanVsInvestmentRequest(principal=10_000, loan_rate=10, investment_rate=2, years=3, currency="EUR")
    )

    assert result.net_benefit < 0
    assert result.guidance.startswith("Paying off the loan appears more beneficial.")
    assert "-€" in result.guidance


def test_market_timing_cost():
    result = calculate_market_timing_cost(
        MarketTimingCostRequest(initial_investment=10_000, market_return=7, missed_days_return=3, years=10)
    )

    assert math.isclose(result.value_if_invested, 10_000 * 1.07**10, rel_tol=1e-12)
    assert math.isclose(result.value_if_best_days_missed, 10_000 * 1.03**10, rel_tol=1e-12)
    assert math.isclose(
        result.opportunity_cost_pct, result.opportunity_cost / result.value_if_invested * 100, rel_tol=1e-12
    )


def test_market_timing_cost_accepts_fractional_years():
    result = calculate_market_timing_cost(
        MarketTimingCostRequest(initial_investment=10_000, market_return=7, missed_days_return=3, years=2.5)
    )

    assert math.isclose(result.value_if_invested, 10_000 * 1.07**2.5, rel_tol=1e-12)
    assert math.isclose(result.value_if_best_days_missed, 10_000 * 1.03**2.5, rel_tol=1e-12)


def test_market_timing_cost_is_zero_when_returns_match():
    result = calculate_market_timing_cost(MarketTimingCostRequest(market_return=5, missed_days_return=5))

    assert result.opportunity_cost == 0
    assert result.opportunity_cost_pct == 0
