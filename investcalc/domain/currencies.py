"""
Static currency table and placeholder exchange rates.

The rates below are fixed illustrative numbers, not market data. They exist so
the converter and the fiat estimates have something to multiply by; nothing
here should be read as an authoritative quote.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    label: str
    symbol: str


AVAILABLE_CURRENCIES: Tuple[Currency, ...] = (
    Currency(code="USD", label="USD ($)", symbol="$"),
    Currency(code="EUR", label="EUR (€)", symbol="€"),
    Currency(code="GBP", label="GBP (£)", symbol="£"),
    Currency(code="INR", label="INR (₹)", symbol="₹"),
    Currency(code="JPY", label="JPY (¥)", symbol="¥"),
    Currency(code="AUD", label="AUD (A$)", symbol="A$"),
    Currency(code="CAD", label="CAD (C$)", symbol="C$"),
    Currency(code="CHF", label="CHF (Fr)", symbol="CHF"),
    Currency(code="CNY", label="CNY (元)", symbol="元"),
)

DEFAULT_CURRENCY = "USD"

# PLACEHOLDER_RATES[source][target] = units of target per unit of source
PLACEHOLDER_RATES: Dict[str, Dict[str, float]] = {
    "USD": {"EUR": 0.93, "GBP": 0.79, "INR": 83.50, "JPY": 157.00, "AUD": 1.50, "CAD": 1.37, "CHF": 0.90, "CNY": 7.25, "USD": 1.00},
    "EUR": {"USD": 1.08, "GBP": 0.85, "INR": 90.20, "JPY": 169.50, "AUD": 1.62, "CAD": 1.48, "CHF": 0.97, "CNY": 7.83, "EUR": 1.00},
    "GBP": {"USD": 1.27, "EUR": 1.18, "INR": 106.00, "JPY": 199.80, "AUD": 1.91, "CAD": 1.74, "CHF": 1.14, "CNY": 9.21, "GBP": 1.00},
    "INR": {"USD": 0.012, "EUR": 0.011, "GBP": 0.0095, "JPY": 1.88, "AUD": 0.018, "CAD": 0.016, "CHF": 0.0108, "CNY": 0.087, "INR": 1.00},
    "JPY": {"USD": 0.0064, "EUR": 0.0059, "GBP": 0.0050, "INR": 0.53, "AUD": 0.0096, "CAD": 0.0087, "CHF": 0.0057, "CNY": 0.046, "JPY": 1.00},
    "AUD": {"USD": 0.66, "EUR": 0.62, "GBP": 0.52, "INR": 55.40, "JPY": 104.10, "CAD": 0.91, "CHF": 0.60, "CNY": 4.81, "AUD": 1.00},
    "CAD": {"USD": 0.73, "EUR": 0.68, "GBP": 0.57, "INR": 60.80, "JPY": 114.40, "AUD": 1.10, "CHF": 0.66, "CNY": 5.29, "CAD": 1.00},
    "CHF": {"USD": 1.11, "EUR": 1.03, "GBP": 0.88, "INR": 92.80, "JPY": 174.80, "AUD": 1.67, "CAD": 1.51, "CNY": 8.08, "CHF": 1.00},
    "CNY": {"USD": 0.138, "EUR": 0.128, "GBP": 0.109, "INR": 11.50, "JPY": 21.65, "AUD": 0.208, "CAD": 0.189, "CHF": 0.124, "CNY": 1.00},
}


def get_currency(code: str) -> Optional[Currency]:
    code = code.upper()
    for currency in AVAILABLE_CURRENCIES:
        if currency.code == code:
            return currency
    return None


def placeholder_rate(source: str, target: str) -> Optional[float]:
    source, target = source.upper(), target.upper()
    if source == target:
        return 1.0
    return PLACEHOLDER_RATES.get(source, {}).get(target)


def validate_currency_code(code: str) -> str:
    """Pydantic field validator body: normalise and reject unknown codes."""
    currency = get_currency(code)
    if currency is None:
        supported = ", ".join(item.code for item in AVAILABLE_CURRENCIES)
        raise ValueError(f"unsupported currency '{code}' (expected one of {supported})")
    return currency.code
