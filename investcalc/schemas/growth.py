"""Data contracts for compounding growth calculators."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.common import MAX_AMOUNT, CompoundingFrequency, Money, PeriodDataPoint


class CompoundInterestRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(10000.0, gt=0, le=MAX_AMOUNT, description="Amount invested at period 0.")
    annual_rate: float = Field(7.0, ge=0, le=100, description="Annual interest rate in percent.")
    years: int = Field(10, ge=1, le=100)
    compounding: CompoundingFrequency = CompoundingFrequency.MONTHLY


class CompoundInterestResult(BaseModel):
    future_value: Money
    total_invested: Money
    total_interest: Money
    annual_breakdown: List[PeriodDataPoint]


class SipRequest(BaseModel):
    """Systematic Investment Plan: a fixed deposit at the start of every month."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    monthly_investment: float = Field(5000.0, ge=1, le=MAX_AMOUNT)
    annual_rate: float = Field(12.0, ge=0, le=100, description="Expected annual return in percent.")
    years: int = Field(10, ge=1, le=50)


class SipResult(BaseModel):
    total_invested: Money
    estimated_returns: Money
    future_value: Money
    annual_breakdown: List[PeriodDataPoint]


class SipVsLumpsumRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    total_investment: float = Field(120000.0, ge=1, le=MAX_AMOUNT)
    annual_rate: float = Field(12.0, ge=0, le=100)
    years: int = Field(10, ge=1, le=50)


class SipVsLumpsumResult(BaseModel):
    total_invested: Money
    lumpsum_future_value: Money
    sip_monthly_investment: Money
    sip_future_value: Money
    difference: Money = Field(..., description="Lumpsum minus SIP future value.")
    better_strategy: Literal["lumpsum", "sip", "equal"]


class TimeValueOfMoneyRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    value: float = Field(
        1000.0, ge=-MAX_AMOUNT, le=MAX_AMOUNT, description="PV when solving for FV, FV when solving for PV."
    )
    rate: float = Field(5.0, ge=0, le=100, description="Rate per period in percent.")
    periods: int = Field(10, ge=1, le=100)
    calculation_type: Literal["FV", "PV"] = "FV"


class TimeValueOfMoneyResult(BaseModel):
    calculated_value: Money
    label: str
    periodic_breakdown: List[PeriodDataPoint]
