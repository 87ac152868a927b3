"""Data contracts for goal-seeking and retirement calculators."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from investcalc.schemas.common import MAX_AMOUNT, Money, PeriodDataPoint, Percent


class GoalPlanningRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    target_amount: float = Field(50000.0, ge=1, le=MAX_AMOUNT)
    years: float = Field(
        5.0, ge=1, le=100, description="Years to reach the goal; fractions are rounded to whole months."
    )
    annual_rate: float = Field(7.0, ge=0, le=100)
    initial_investment: float = Field(0.0, ge=0, le=MAX_AMOUNT)


class GoalPlanningResult(BaseModel):
    required_monthly_investment: Money
    total_contributions: Money
    projected_value: Money
    goal_already_met: bool
    annual_breakdown: List[PeriodDataPoint]


class RetirementCorpusRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    current_age: int = Field(30, ge=18, le=99)
    retirement_age: int = Field(60, ge=19, le=100)
    monthly_expenses_at_retirement: float = Field(5000.0, ge=1, le=MAX_AMOUNT)
    years_in_retirement: int = Field(25, ge=1, le=50)
    inflation_rate: float = Field(6.0, ge=0, le=20)
    return_rate: float = Field(7.0, ge=0, le=20, description="Expected return after retirement, percent.")

    @model_validator(mode="after")
    def ensure_validity(self) -> "RetirementCorpusRequest":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirement_age must be greater than current_age")
        return self


class RetirementCorpusResult(BaseModel):
    required_corpus: Money
    annual_expenses: Money
    real_return_rate: Percent
    years_to_retirement: int
    years_in_retirement: int
