"""Shared building blocks for calculator request/response contracts."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer


# Upper bound for money inputs. Every projection from bounded inputs stays finite.
MAX_AMOUNT = 1e12


def _rounder(digits: int) -> PlainSerializer:
    return PlainSerializer(lambda value: round(value, digits), return_type=float)


# Values keep full precision in Python and are rounded only when dumped.
Money = Annotated[float, _rounder(2)]
Percent = Annotated[float, _rounder(2)]
Ratio = Annotated[float, _rounder(2)]
CryptoUnits = Annotated[float, _rounder(8)]


class Frequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

    @property
    def periods_per_year(self) -> int:
        return {"monthly": 12, "quarterly": 4, "annually": 1}[self.value]


class CompoundingFrequency(str, Enum):
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi_annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"

    @property
    def periods_per_year(self) -> int:
        return {"annually": 1, "semi_annually": 2, "quarterly": 4, "monthly": 12}[self.value]


class PeriodDataPoint(BaseModel):
    """Single row of a balance schedule (one year, or one period)."""

    period: int = Field(..., ge=0)
    opening_balance: Money
    growth: Money = 0.0
    contribution: Money = 0.0
    withdrawal: Money = 0.0
    closing_balance: Money


def percent_to_decimal(value: float) -> float:
    return value / 100.0
