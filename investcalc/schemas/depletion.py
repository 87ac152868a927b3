"""Data contracts for withdrawal and payout calculators."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.common import MAX_AMOUNT, Frequency, Money, PeriodDataPoint


class SwpRequest(BaseModel):
    """Systematic Withdrawal Plan inputs."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial_investment: float = Field(1000000.0, ge=1, le=MAX_AMOUNT)
    monthly_withdrawal: float = Field(5000.0, ge=1, le=MAX_AMOUNT)
    annual_rate: float = Field(7.0, ge=0, le=100, description="Expected annual return in percent.")
    years: int = Field(20, ge=1, le=50, description="Withdrawal period in years.")


class SwpResult(BaseModel):
    total_withdrawn: Money
    total_growth: Money
    final_balance: Money
    depleted: bool
    depletion_month: Optional[int] = None
    depletion_year: Optional[int] = None
    message: Optional[str] = None
    annual_breakdown: List[PeriodDataPoint]


class AnnuityRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(100000.0, ge=1, le=MAX_AMOUNT)
    annual_rate: float = Field(5.0, ge=0, le=100)
    years: int = Field(10, ge=1, le=50, description="Payout period in years.")
    payment_frequency: Frequency = Frequency.MONTHLY


class AnnuityResult(BaseModel):
    periodic_payment: Money
    total_payments: Money
    total_interest: Money
    corpus_depletion_year: Optional[int] = None
    annual_breakdown: List[PeriodDataPoint]
