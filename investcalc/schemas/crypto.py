"""Data contracts for crypto accumulation and fee calculators."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from investcalc.domain.currencies import DEFAULT_CURRENCY
from investcalc.schemas.common import MAX_AMOUNT, CryptoUnits, Frequency, Money
from investcalc.schemas.currency import CurrencyCode


class CryptoDcaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    periodic_investment: float = Field(100.0, ge=1, le=MAX_AMOUNT)
    frequency: Frequency = Frequency.MONTHLY
    years: int = Field(5, ge=1, le=50)
    average_price: float = Field(
        30000.0, ge=0.000001, le=MAX_AMOUNT, description="Estimated average purchase price per unit."
    )
    expected_annual_return: float = Field(5.0, ge=0, le=100)


class DcaDataPoint(BaseModel):
    year: int
    total_invested: Money
    units_held: CryptoUnits
    portfolio_value: Money


class CryptoDcaResult(BaseModel):
    total_invested: Money
    units_acquired: CryptoUnits
    average_cost_per_unit: Money
    portfolio_value: Money
    annual_breakdown: List[DcaDataPoint]


class Network(str, Enum):
    ETHEREUM = "ethereum"
    BITCOIN = "bitcoin"
    POLYGON = "polygon"
    SOLANA = "solana"


class BlockchainFeeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    gas_units: float = Field(21000.0, ge=1, le=MAX_AMOUNT)
    gas_price: float = Field(
        20.0,
        ge=0.000000001,
        le=MAX_AMOUNT,
        description="Gwei for EVM networks, lamports for Solana, satoshis for Bitcoin.",
    )
    network: Network = Network.ETHEREUM
    currency: CurrencyCode = DEFAULT_CURRENCY


class BlockchainFeeResult(BaseModel):
    fee_native: CryptoUnits
    native_symbol: str
    fee_usd: Money
    fee_fiat: Money
    currency: str
    disclaimer: str
