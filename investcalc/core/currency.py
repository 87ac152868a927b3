"""Currency conversion and display helpers backed by placeholder rates."""

from __future__ import annotations

from investcalc.domain.currencies import get_currency, placeholder_rate
from investcalc.errors import CalculatorInputError
from investcalc.schemas.currency import CurrencyConverterRequest, CurrencyConverterResult

PLACEHOLDER_DISCLAIMER = "Converted with static placeholder exchange rates; not real-time market data."


def convert_amount(amount: float, source: str, target: str) -> float:
    rate = placeholder_rate(source, target)
    if rate is None:
        raise CalculatorInputError.for_field(
            "to_currency",
            f"Conversion rate from {source} to {target} is not available with placeholder data.",
        )
    return amount * rate


def format_money(amount: float, currency_code: str) -> str:
    """'$1,234.56' style display string; unknown codes fall back to the code itself."""
    currency = get_currency(currency_code)
    symbol = currency.symbol if currency else f"{currency_code} "
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def convert_currency(request: CurrencyConverterRequest) -> CurrencyConverterResult:
    converted = convert_amount(request.amount, request.from_currency, request.to_currency)
    return CurrencyConverterResult(
        original_amount=request.amount,
        converted_amount=converted,
        from_currency=get_currency(request.from_currency),
        to_currency=get_currency(request.to_currency),
        rate_used=placeholder_rate(request.from_currency, request.to_currency),
        disclaimer=PLACEHOLDER_DISCLAIMER,
    )
