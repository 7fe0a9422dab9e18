"""Tests for the Multi-Currency Support module."""

import pytest

from wealthdash.analyzers.currency import (
    CURRENCIES,
    CurrencyConverter,
    convert_amount,
    format_amount,
    format_converted,
    get_currency_meta,
    supported_currencies,
)
from wealthdash.exceptions import ConfigurationError


class TestCurrencyTable:
    """Test the static rate table."""

    def test_usd_is_identity(self):
        assert CURRENCIES["USD"].rate == 1
        assert CURRENCIES["USD"].symbol == "$"

    def test_inr_info(self):
        meta = CURRENCIES["INR"]
        assert meta.symbol == "₹"
        assert meta.rate == 83.5
        assert meta.label == "Indian Rupee"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CURRENCIES["XYZ"] = CURRENCIES["USD"]

    def test_supported_currencies_usd_first(self):
        codes = [m.code for m in supported_currencies()]
        assert codes[0] == "USD"
        assert set(codes) == {"USD", "EUR", "GBP", "INR", "JPY", "CAD", "AUD"}


class TestConvertAmount:
    """Test convert_amount()."""

    def test_inr(self):
        assert convert_amount(100, "INR") == pytest.approx(8350)

    def test_usd_identity(self):
        assert convert_amount(123.45, "USD") == 123.45

    def test_code_is_case_insensitive(self):
        assert convert_amount(10, " eur ") == pytest.approx(9.2)

    @pytest.mark.parametrize("amount", [0.01, 1.0, 2602.5, 1_000_000.0])
    def test_round_trip_through_eur(self, amount):
        eur = convert_amount(amount, "EUR")
        back = convert_amount(eur / CURRENCIES["EUR"].rate, "USD")
        assert back == pytest.approx(amount)

    def test_unknown_code_raises(self):
        """No silent fallback to USD."""
        with pytest.raises(ConfigurationError, match="XYZ"):
            convert_amount(100, "XYZ")

    def test_non_string_code_raises(self):
        with pytest.raises(ConfigurationError):
            convert_amount(100, None)


class TestCurrencyMeta:
    def test_meta(self):
        meta = get_currency_meta("gbp")
        assert meta.code == "GBP"
        assert meta.symbol == "£"
        assert meta.label == "British Pound"

    def test_unknown(self):
        with pytest.raises(ConfigurationError):
            get_currency_meta("BTC")


class TestFormatAmount:
    def test_format_inr(self):
        assert format_amount(100, "INR") == "₹8,350.00"

    def test_format_default_usd(self):
        assert format_amount(1234.5) == "$1,234.50"

    def test_format_negative(self):
        assert format_amount(-50, "USD") == "-$50.00"

    def test_format_no_decimals(self):
        assert format_amount(10, "JPY", decimals=0) == "¥1,500"

    def test_format_converted_does_not_convert(self):
        assert format_converted(8350, "INR") == "₹8,350.00"

    def test_format_converted_negative(self):
        assert format_converted(-12, "USD") == "-$12.00"
        assert CurrencyConverter("EUR").format_converted(-1234.5) == "-€1,234.50"


class TestCurrencyConverter:
    def test_bound_converter(self):
        converter = CurrencyConverter("CAD")
        assert converter.code == "CAD"
        assert converter.symbol == "C$"
        assert converter.convert(100) == pytest.approx(135)
        assert converter.format(100) == "C$135.00"

    def test_default_is_usd(self):
        assert CurrencyConverter().code == "USD"

    def test_unknown_currency(self):
        with pytest.raises(ConfigurationError):
            CurrencyConverter("ZZZ")
