"""Data contracts for simple return, yield and volatility calculators."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.common import MAX_AMOUNT, Money, Percent


class ReturnSummary(BaseModel):
    """Shared result shape: money in, money out, profit and its percentage."""

    total_investment: Money
    total_return: Money
    profit_or_loss: Money
    return_pct: Percent


class StockReturnRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    purchase_price: float = Field(100.0, ge=0.01, le=MAX_AMOUNT)
    selling_price: float = Field(120.0, ge=0, le=MAX_AMOUNT)
    shares: float = Field(10.0, ge=0.0001, le=MAX_AMOUNT)


class StockReturnResult(ReturnSummary):
    pass


class BitcoinRoiRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial_investment: float = Field(1000.0, ge=0.01, le=MAX_AMOUNT)
    current_value: float = Field(1500.0, ge=0, le=MAX_AMOUNT)


class BitcoinRoiResult(ReturnSummary):
    pass


class IcoRoiRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    investment_amount: float = Field(1000.0, ge=0.01, le=MAX_AMOUNT)
    tokens_received: float = Field(10000.0, ge=0, le=MAX_AMOUNT)
    current_token_price: float = Field(0.25, ge=0, le=MAX_AMOUNT)


class IcoRoiResult(ReturnSummary):
    pass


class RealEstateRoiRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    purchase_price: float = Field(250000.0, ge=1, le=MAX_AMOUNT)
    additional_expenses: float = Field(20000.0, ge=0, le=MAX_AMOUNT, description="Renovation, fees and other costs.")
    sale_price: float = Field(320000.0, ge=0, le=MAX_AMOUNT)
    rental_income: float = Field(
        30000.0, ge=0, le=MAX_AMOUNT, description="Total rental income over the holding period."
    )


class RealEstateRoiResult(ReturnSummary):
    pass


class DividendYieldRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    annual_dividend: float = Field(2.0, ge=0, le=MAX_AMOUNT)
    share_price: float = Field(50.0, ge=0.01, le=MAX_AMOUNT)


class DividendYieldResult(BaseModel):
    dividend_yield: Percent


class VolatilityRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    historical_prices: str = Field(
        "100, 102, 101, 105, 103",
        min_length=1,
        description="Comma-separated closing prices.",
    )


class VolatilityResult(BaseModel):
    prices_used: List[float]
    mean_price: Money
    standard_deviation: Money
    coefficient_of_variation: Percent
