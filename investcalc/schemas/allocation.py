"""Data contracts for allocation calculators."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.common import MAX_AMOUNT, Money, Percent


class AllocationSlice(BaseModel):
    name: str
    percentage: Percent
    value: Optional[Money] = None


class AllocationBreakdown(BaseModel):
    slices: List[AllocationSlice]
    total_percentage: Percent
    unallocated_percentage: Percent = 0.0
    total_value: Optional[Money] = None
    note: Optional[str] = None


class GlobalAllocationRequest(BaseModel):
    """Regional weights in percent; they may not add up to more than 100."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    north_america: float = Field(60.0, ge=0, le=100)
    europe: float = Field(20.0, ge=0, le=100)
    asia_pacific: float = Field(10.0, ge=0, le=100)
    emerging_markets: float = Field(10.0, ge=0, le=100)
    other_regions: float = Field(0.0, ge=0, le=100)

    def labelled(self) -> Dict[str, float]:
        return {
            "North America": self.north_america,
            "Europe": self.europe,
            "Asia-Pacific": self.asia_pacific,
            "Emerging Markets": self.emerging_markets,
            "Other Regions": self.other_regions,
        }


class PortfolioAllocationRequest(BaseModel):
    """Current holdings per asset class, in currency units."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    stocks: float = Field(5000.0, ge=0, le=MAX_AMOUNT)
    bonds: float = Field(3000.0, ge=0, le=MAX_AMOUNT)
    crypto: float = Field(1000.0, ge=0, le=MAX_AMOUNT)
    real_estate: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    cash: float = Field(1000.0, ge=0, le=MAX_AMOUNT)

    def labelled(self) -> Dict[str, float]:
        return {
            "Stocks": self.stocks,
            "Bonds": self.bonds,
            "Crypto": self.crypto,
            "Real Estate": self.real_estate,
            "Cash": self.cash,
        }
