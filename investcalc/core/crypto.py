"""Crypto dollar-cost averaging and transaction fee estimates."""

from __future__ import annotations

from typing import Dict, List

from investcalc.core.currency import PLACEHOLDER_DISCLAIMER, convert_amount
from investcalc.schemas.common import percent_to_decimal
from investcalc.schemas.crypto import (
    BlockchainFeeRequest,
    BlockchainFeeResult,
    CryptoDcaRequest,
    CryptoDcaResult,
    DcaDataPoint,
    Network,
)

# smallest unit -> native token
NETWORK_UNIT_DIVISORS: Dict[Network, float] = {
    Network.ETHEREUM: 1e9,
    Network.POLYGON: 1e9,
    Network.SOLANA: 1e9,
    Network.BITCOIN: 1e8,
}

# placeholder USD price of one native token
NETWORK_USD_PRICES: Dict[Network, float] = {
    Network.ETHEREUM: 2000.0,
    Network.BITCOIN: 30000.0,
    Network.POLYGON: 0.8,
    Network.SOLANA: 20.0,
}

NETWORK_SYMBOLS: Dict[Network, str] = {
    Network.ETHEREUM: "ETH",
    Network.BITCOIN: "BTC",
    Network.POLYGON: "MATIC",
    Network.SOLANA: "SOL",
}


def effective_periodic_rate(annual_rate: float, periods_per_year: int) -> float:
    """Periodic rate that compounds to ``annual_rate`` (decimal) over one year."""
    if annual_rate <= 0:
        return 0.0
    return (1 + annual_rate) ** (1 / periods_per_year) - 1


def calculate_crypto_dca(request: CryptoDcaRequest) -> CryptoDcaResult:
    """
    Buy a fixed amount each period at an estimated average price.

    Existing holdings appreciate first; the units bought in a period are
    carried at cost and start appreciating from the next period.
    """
    periods_per_year = request.frequency.periods_per_year
    rate = effective_periodic_rate(percent_to_decimal(request.expected_annual_return), periods_per_year)
    units_per_purchase = request.periodic_investment / request.average_price

    invested = 0.0
    units = 0.0
    value = 0.0
    rows: List[DcaDataPoint] = []

    for year in range(1, request.years + 1):
        for _ in range(periods_per_year):
            value *= 1 + rate
            invested += request.periodic_investment
            units += units_per_purchase
            value += request.periodic_investment
        rows.append(DcaDataPoint(year=year, total_invested=invested, units_held=units, portfolio_value=value))

    return CryptoDcaResult(
        total_invested=invested,
        units_acquired=units,
        average_cost_per_unit=invested / units if units else 0.0,
        portfolio_value=value,
        annual_breakdown=rows,
    )


def calculate_blockchain_fee(request: BlockchainFeeRequest) -> BlockchainFeeResult:
    network = request.network
    fee_native = request.gas_units * request.gas_price / NETWORK_UNIT_DIVISORS[network]
    fee_usd = fee_native * NETWORK_USD_PRICES[network]

    return BlockchainFeeResult(
        fee_native=fee_native,
        native_symbol=NETWORK_SYMBOLS[network],
        fee_usd=fee_usd,
        fee_fiat=convert_amount(fee_usd, "USD", request.currency),
        currency=request.currency,
        disclaimer=f"Token prices and exchange rates are placeholders. {PLACEHOLDER_DISCLAIMER}",
    )
