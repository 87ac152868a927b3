"""Data contracts for the currency converter."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from investcalc.domain.currencies import DEFAULT_CURRENCY, Currency, validate_currency_code
from investcalc.schemas.common import MAX_AMOUNT, Money

CurrencyCode = Annotated[str, AfterValidator(validate_currency_code)]
ExchangeRate = Annotated[float, PlainSerializer(lambda value: round(value, 4), return_type=float)]


class CurrencyConverterRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    amount: float = Field(100.0, ge=0, le=MAX_AMOUNT)
    from_currency: CurrencyCode = DEFAULT_CURRENCY
    to_currency: CurrencyCode = "EUR"


class CurrencyConverterResult(BaseModel):
    original_amount: Money
    converted_amount: Money
    from_currency: Currency
    to_currency: Currency
    rate_used: ExchangeRate
    disclaimer: str
