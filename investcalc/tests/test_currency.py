from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from investcalc.core.currency import convert_currency, format_money
from investcalc.domain.currencies import AVAILABLE_CURRENCIES, placeholder_rate
from investcalc.schemas.currency import CurrencyConverterRequest


def test_nine_currencies_are_offered():
    assert [currency.code for currency in AVAILABLE_CURRENCIES] == [
        "USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD", "CHF", "CNY",
    ]


def test_convert_usd_to_eur():
    result = convert_currency(CurrencyConverterRequest(amount=100, from_currency="USD", to_currency="EUR"))

    assert math.isclose(result.converted_amount, 93.0)
    assert result.from_currency.symbol == "$"
    assert result.to_currency.code == "EUR"
    assert "placeholder" in result.disclaimer


def test_same_currency_rate_is_one():
    assert placeholder_rate("GBP", "gbp") == 1.0


def test_currency_codes_are_normalised():
    request = CurrencyConverterRequest(amount=10, from_currency="inr", to_currency="usd")

    assert request.from_currency == "INR"
    assert request.to_currency == "USD"


def test_unknown_currency_is_rejected():
    with pytest.raises(ValidationError):
        CurrencyConverterRequest(amount=10, from_currency="XYZ")


@pytest.mark.parametrize(
    "amount, code, expected",
    [
        (1234.5, "USD", "$1,234.50"),
        (-99.999, "EUR", "-€100.00"),
        (0, "INR", "₹0.00"),
    ],
)
def test_format_money(amount, code, expected):
    assert format_money(amount, code) == expected
