"""
Multi-Currency Support — rescale USD totals for display.

All aggregation happens in USD. Conversion is a view transform applied to
already-aggregated figures and is never written back to the entities.
The rate table is static: loaded once at import time and read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from wealthdash.exceptions import ConfigurationError

BASE_CURRENCY = "USD"


@dataclass(frozen=True)
class CurrencyMeta:
    """Display metadata and USD exchange rate for one currency."""

    code: str
    symbol: str
    rate: float  # units of this currency per 1 USD
    label: str


CURRENCIES: Mapping[str, CurrencyMeta] = MappingProxyType({
    "USD": CurrencyMeta("USD", "$", 1.0, "US Dollar"),
    "EUR": CurrencyMeta("EUR", "€", 0.92, "Euro"),
    "GBP": CurrencyMeta("GBP", "£", 0.79, "British Pound"),
    "INR": CurrencyMeta("INR", "₹", 83.5, "Indian Rupee"),
    "JPY": CurrencyMeta("JPY", "¥", 150.0, "Japanese Yen"),
    "CAD": CurrencyMeta("CAD", "C$", 1.35, "Canadian Dollar"),
    "AUD": CurrencyMeta("AUD", "A$", 1.52, "Australian Dollar"),
})


def normalize_code(currency_code: str) -> str:
    """Canonical form of a currency code: trimmed, upper-case."""
    if not isinstance(currency_code, str):
        raise ConfigurationError(f"Currency code must be a string, got {type(currency_code).__name__}")
    return currency_code.strip().upper()


def get_currency_meta(currency_code: str) -> CurrencyMeta:
    """
    Look up symbol, label and rate for a currency.

    Raises:
        ConfigurationError: The code is not in the rate table. There is
            no silent fallback to USD.
    """
    code = normalize_code(currency_code)
    try:
        return CURRENCIES[code]
    except KeyError:
        supported = ", ".join(CURRENCIES)
        raise ConfigurationError(
            f"Unsupported currency code {currency_code!r} (supported: {supported})"
        ) from None


def convert_amount(amount_usd: float, currency_code: str) -> float:
    """Convert an aggregated USD amount into ``currency_code``."""
    return amount_usd * get_currency_meta(currency_code).rate


def format_amount(amount_usd: float, currency_code: str = BASE_CURRENCY, decimals: int = 2) -> str:
    """Convert and format, e.g. ``format_amount(100, "INR") == "₹8,350.00"``."""
    return format_converted(convert_amount(amount_usd, currency_code), currency_code, decimals)


def format_converted(value: float, currency_code: str = BASE_CURRENCY, decimals: int = 2) -> str:
    """Format an amount already in ``currency_code``; the sign goes before the symbol."""
    meta = get_currency_meta(currency_code)
    sign = "-" if value < 0 else ""
    return f"{sign}{meta.symbol}{abs(value):,.{decimals}f}"


def supported_currencies() -> list[CurrencyMeta]:
    """All currencies in table order (USD first)."""
    return list(CURRENCIES.values())


class CurrencyConverter:
    """
    Converter bound to one display currency.

    Example usage:
        converter = CurrencyConverter("INR")
        converter.convert(100)   # 8350.0
        converter.format(100)    # "₹8,350.00"
    """

    def __init__(self, display_currency: str = BASE_CURRENCY):
        self.meta = get_currency_meta(display_currency)

    @property
    def code(self) -> str:
        return self.meta.code

    @property
    def symbol(self) -> str:
        return self.meta.symbol

    def convert(self, amount_usd: float) -> float:
        return amount_usd * self.meta.rate

    def format(self, amount_usd: float, decimals: int = 2) -> str:
        return format_amount(amount_usd, self.meta.code, decimals)

    def format_converted(self, value: float, decimals: int = 2) -> str:
        return format_converted(value, self.meta.code, decimals)
