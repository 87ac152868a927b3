from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from investcalc.core.returns import (
    calculate_bitcoin_roi,
    calculate_dividend_yield,
    calculate_ico_roi,
    calculate_real_estate_roi,
    calculate_stock_return,
    calculate_volatility,
    parse_prices,
)
from investcalc.core.taxes import calculate_crypto_tax, calculate_elss_tax_saving
from investcalc.errors import CalculatorInputError
from investcalc.schemas.returns import (
    BitcoinRoiRequest,
    DividendYieldRequest,
    IcoRoiRequest,
    RealEstateRoiRequest,
    StockReturnRequest,
    VolatilityRequest,
)
from investcalc.schemas.taxes import CryptoTaxRequest, ElssTaxSavingRequest


def test_stock_return():
    result = calculate_stock_return(StockReturnRequest(purchase_price=100, selling_price=120, shares=10))

    assert result.total_investment == 1000
    assert result.total_return == 1200
    assert result.profit_or_loss == 200
    assert math.isclose(result.return_pct, 20.0)


def test_bitcoin_roi_loss():
    result = calculate_bitcoin_roi(BitcoinRoiRequest(initial_investment=2000, current_value=1500))

    assert result.profit_or_loss == -500
    assert math.isclose(result.return_pct, -25.0)


def test_ico_roi_values_tokens_at_current_price():
    result = calculate_ico_roi(IcoRoiRequest(investment_amount=1000, tokens_received=10_000, current_token_price=0.25))

    assert result.total_return == 2500
    assert math.isclose(result.return_pct, 150.0)


def test_real_estate_roi_includes_expenses_and_rent():
    result = calculate_real_estate_roi(
        RealEstateRoiRequest(purchase_price=200_000, additional_expenses=50_000, sale_price=250_000, rental_income=25_000)
    )

    assert result.total_investment == 250_000
    assert result.total_return == 275_000
    assert math.isclose(result.return_pct, 10.0)


def test_dividend_yield():
    result = calculate_dividend_yield(DividendYieldRequest(annual_dividend=2, share_price=50))

    assert math.isclose(result.dividend_yield, 4.0)


def test_volatility_is_population_standard_deviation():
    result = calculate_volatility(VolatilityRequest(historical_prices="2, 4, 4, 4, 5, 5, 7, 9"))

    assert result.prices_used == [2, 4, 4, 4, 5, 5, 7, 9]
    assert math.isclose(result.mean_price, 5.0)
    assert math.isclose(result.standard_deviation, 2.0)
    assert math.isclose(result.coefficient_of_variation, 40.0)


def test_parse_prices_skips_blank_and_invalid_entries():
    assert parse_prices("10, , abc, 12.5,") == [10.0, 12.5]


def test_parse_prices_skips_values_out_of_range():
    assert parse_prices("1e308, 10, inf, nan, -1e200, 12") == [10.0, 12.0]


@pytest.mark.parametrize("raw", ["100", "abc, 5", " , "])
def test_volatility_needs_two_prices(raw):
    with pytest.raises(CalculatorInputError) as excinfo:
        calculate_volatility(VolatilityRequest(historical_prices=raw))

    assert excinfo.value.errors[0][0] == "historical_prices"


def test_crypto_tax():
    result = calculate_crypto_tax(CryptoTaxRequest(total_gains=10_000, tax_rate=30))

    assert result.estimated_tax == 3000
    assert result.gains_after_tax == 7000


def test_elss_tax_saving():
    result = calculate_elss_tax_saving(ElssTaxSavingRequest(investment_amount=100_000, tax_slab_rate=20))

    assert result.eligible_deduction == 100_000
    assert result.tax_saved == 20_000


def test_elss_investment_above_section_80c_limit_is_rejected():
    with pytest.raises(ValidationError):
        ElssTaxSavingRequest(investment_amount=150_001, tax_slab_rate=30)
