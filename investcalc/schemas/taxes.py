"""Data contracts for the tax estimate calculators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.common import MAX_AMOUNT, Money

# Section 80C deduction ceiling (INR)
SECTION_80C_LIMIT = 150000.0


class CryptoTaxRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    total_gains: float = Field(10000.0, ge=0, le=MAX_AMOUNT)
    tax_rate: float = Field(30.0, ge=0, le=100)


class CryptoTaxResult(BaseModel):
    estimated_tax: Money
    gains_after_tax: Money


class ElssTaxSavingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    investment_amount: float = Field(
        150000.0,
        ge=1,
        le=SECTION_80C_LIMIT,
        description="Amount invested in ELSS funds this financial year.",
    )
    tax_slab_rate: float = Field(30.0, ge=0, le=100)


class ElssTaxSavingResult(BaseModel):
    eligible_deduction: Money
    tax_saved: Money
