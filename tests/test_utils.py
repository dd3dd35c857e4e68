"""
Tests for configuration and formatting helpers.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from realestate.utils import Config, format_currency, format_percent


class TestConfig:
    """Tests for environment-driven configuration."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("REALESTATE_LOG_LEVEL", "REALESTATE_VERBOSE", "REALESTATE_CURRENCY"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        config = Config.load()

        assert config.log_level == "WARNING"
        assert config.verbose is False
        assert config.currency == "HUF"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("REALESTATE_LOG_LEVEL", "debug")
        monkeypatch.setenv("REALESTATE_VERBOSE", "TRUE")
        monkeypatch.setenv("REALESTATE_CURRENCY", "eur")

        config = Config.load()

        assert config.log_level == "DEBUG"
        assert config.verbose is True
        assert config.currency == "EUR"

    def test_verbose_only_for_true(self, monkeypatch):
        monkeypatch.setenv("REALESTATE_VERBOSE", "yes")
        assert Config.load().verbose is False

    def test_to_dict(self):
        assert Config.load().to_dict() == {
            "log_level": "WARNING",
            "verbose": False,
            "currency": "HUF",
        }


class TestFormatting:
    """Tests for currency and percentage formatting."""

    def test_default_currency_is_text_prefix(self):
        assert format_currency(2450000) == "HUF 2,450,000"

    @pytest.mark.parametrize(
        "currency,expected",
        [("GBP", "£1,929,375"), ("USD", "$1,929,375"), ("EUR", "€1,929,375")],
    )
    def test_symbols(self, currency, expected):
        assert format_currency(1929375, currency) == expected

    def test_fraction_truncated(self):
        assert format_currency(612500.99) == "HUF 612,500"
        assert format_currency(5250.0, "EUR") == "€5,250"

    def test_negative_amount(self):
        assert format_currency(-50000) == "HUF -50,000"

    def test_percent(self):
        assert format_percent(5) == "5.0%"
        assert format_percent(14.999999999999991) == "15.0%"
        assert format_percent(12.5, decimals=2) == "12.50%"

    def test_signed_percent(self):
        assert format_percent(5.000000000000004, signed=True) == "+5.0%"
        assert format_percent(-5.000000000000004, signed=True) == "-5.0%"
        assert format_percent(0.0, signed=True) == "+0.0%"
        assert format_percent(19.999999999999996, decimals=2, signed=True) == "+20.00%"
