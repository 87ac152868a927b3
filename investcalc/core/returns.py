"""Return, yield and volatility calculators."""

from __future__ import annotations

import math
from typing import List

from investcalc.errors import CalculatorInputError
from investcalc.schemas.common import MAX_AMOUNT
from investcalc.schemas.returns import (
    BitcoinRoiRequest,
    BitcoinRoiResult,
    DividendYieldRequest,
    DividendYieldResult,
    IcoRoiRequest,
    IcoRoiResult,
    RealEstateRoiRequest,
    RealEstateRoiResult,
    StockReturnRequest,
    StockReturnResult,
    VolatilityRequest,
    VolatilityResult,
)


def return_on_investment(invested: float, returned: float) -> float:
    """Percentage gain of ``returned`` over ``invested``; zero when nothing was invested."""
    if invested <= 0:
        return 0.0
    return (returned - invested) / invested * 100


def _summary(invested: float, returned: float) -> dict:
    return {
        "total_investment": invested,
        "total_return": returned,
        "profit_or_loss": returned - invested,
        "return_pct": return_on_investment(invested, returned),
    }


def calculate_stock_return(request: StockReturnRequest) -> StockReturnResult:
    invested = request.purchase_price * request.shares
    returned = request.selling_price * request.shares
    return StockReturnResult(**_summary(invested, returned))


def calculate_bitcoin_roi(request: BitcoinRoiRequest) -> BitcoinRoiResult:
    return BitcoinRoiResult(**_summary(request.initial_investment, request.current_value))


def calculate_ico_roi(request: IcoRoiRequest) -> IcoRoiResult:
    current = request.tokens_received * request.current_token_price
    return IcoRoiResult(**_summary(request.investment_amount, current))


def calculate_real_estate_roi(request: RealEstateRoiRequest) -> RealEstateRoiResult:
    invested = request.purchase_price + request.additional_expenses
    revenue = request.sale_price + request.rental_income
    return RealEstateRoiResult(**_summary(invested, revenue))


def calculate_dividend_yield(request: DividendYieldRequest) -> DividendYieldResult:
    return DividendYieldResult(dividend_yield=request.annual_dividend / request.share_price * 100)


def parse_prices(raw: str) -> List[float]:
    """Parse a comma-separated list, skipping blanks, non-numbers and out-of-range values."""
    prices: List[float] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            value = float(chunk)
        except ValueError:
            continue
        if math.isfinite(value) and abs(value) <= MAX_AMOUNT:
            prices.append(value)
    return prices


def calculate_volatility(request: VolatilityRequest) -> VolatilityResult:
    prices = parse_prices(request.historical_prices)
    if len(prices) < 2:
        raise CalculatorInputError.for_field(
            "historical_prices",
            "Please enter at least two valid prices separated by commas.",
        )

    mean = sum(prices) / len(prices)
    # population variance
    variance = sum((price - mean) ** 2 for price in prices) / len(prices)
    std_dev = math.sqrt(variance)

    return VolatilityResult(
        prices_used=prices,
        mean_price=mean,
        standard_deviation=std_dev,
        coefficient_of_variation=std_dev / mean * 100 if mean else 0.0,
    )
