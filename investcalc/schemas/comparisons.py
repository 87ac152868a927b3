"""Data contracts for ratio and scenario-comparison calculators."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.domain.currencies import DEFAULT_CURRENCY
from investcalc.schemas.common import MAX_AMOUNT, Money, Percent, Ratio
from investcalc.schemas.currency import CurrencyCode


class RiskRewardRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    potential_profit: float = Field(30.0, ge=0.01, le=MAX_AMOUNT)
    potential_loss: float = Field(10.0, ge=0.01, le=MAX_AMOUNT)


class RiskRewardResult(BaseModel):
    ratio: Ratio
    display: str
    guidance: str


class BearMarketSurvivalRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    portfolio_value: float = Field(100000.0, ge=1, le=MAX_AMOUNT)
    drawdown: float = Field(30.0, ge=1, lt=100, description="Peak-to-trough fall in percent.")
    recovery_rate: Optional[float] = Field(
        None,
        ge=0.1,
        le=100,
        description="Assumed annual return during the recovery, percent.",
    )


class BearMarketSurvivalResult(BaseModel):
    value_after_drawdown: Money
    loss_amount: Money
    recovery_needed_pct: Percent
    years_to_recover: Optional[Ratio] = None
    guidance: str


class LoanVsInvestmentRequest(BaseModel):
    """Invest a lump sum or use it to clear a loan charging simple interest."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(10000.0, ge=1, le=MAX_AMOUNT)
    loan_rate: float = Field(5.0, ge=0, le=100)
    investment_rate: float = Field(7.0, ge=0, le=100)
    years: int = Field(5, ge=1, le=50)
    currency: CurrencyCode = DEFAULT_CURRENCY


class LoanVsInvestmentRow(BaseModel):
    year: int
    investment_value: Money
    cumulative_loan_interest: Money
    net_benefit: Money


class LoanVsInvestmentResult(BaseModel):
    final_investment_value: Money
    final_loan_interest: Money
    net_benefit: Money
    guidance: str
    annual_breakdown: List[LoanVsInvestmentRow]


class MarketTimingCostRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial_investment: float = Field(10000.0, ge=1, le=MAX_AMOUNT)
    market_return: float = Field(7.0, ge=-100, le=100, description="Annual return if fully invested.")
    missed_days_return: float = Field(3.0, ge=-100, le=100, description="Annual return if the best days are missed.")
    years: float = Field(10.0, ge=1, le=50)


class MarketTimingCostResult(BaseModel):
    value_if_invested: Money
    value_if_best_days_missed: Money
    opportunity_cost: Money
    opportunity_cost_pct: Percent
