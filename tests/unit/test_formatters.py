"""Tests for display formatters."""

from datetime import date
from decimal import Decimal

import pytest

from cnis_analyzer.shared.formatters import (
    decompose_days,
    format_competencia,
    format_currency,
    format_date,
    format_duration_days,
    parse_iso_date,
)


class TestFormatDurationDays:
    """Tests for the 365/30 day decomposition."""

    def test_zero(self):
        assert format_duration_days(0) == "0a 0m 0d"

    def test_one_year_one_month(self):
        assert format_duration_days(395) == "1a 1m 0d"

    def test_days_only(self):
        assert format_duration_days(10) == "0a 0m 10d"

    def test_remainder_after_twelve_months(self):
        # 364 = 12 * 30 + 4, still under a year
        assert format_duration_days(364) == "0a 12m 4d"

    def test_long_career(self):
        assert format_duration_days(11567) == "31a 8m 12d"

    def test_negative_is_clamped(self):
        assert format_duration_days(-5) == "0a 0m 0d"

    @pytest.mark.parametrize("days", [0, 1, 29, 30, 364, 365, 366, 395, 4000, 11567])
    def test_decomposition_recomposes(self, days):
        anos, meses, dias = decompose_days(days)
        assert anos * 365 + meses * 30 + dias == days
        assert 0 <= dias < 30
        assert 0 <= meses <= 12


class TestFormatCurrency:
    def test_thousands_and_decimals(self):
        assert format_currency(Decimal("1234.56")) == "R$ 1.234,56"

    def test_millions(self):
        assert format_currency(Decimal("12345678.9")) == "R$ 12.345.678,90"

    def test_negative(self):
        assert format_currency(Decimal("-10")) == "-R$ 10,00"


class TestDates:
    def test_parse_plain_date(self):
        assert parse_iso_date("2020-01-31") == date(2020, 1, 31)

    def test_parse_instant(self):
        assert parse_iso_date("2026-06-23T00:00:00.000Z") == date(2026, 6, 23)

    def test_parse_invalid(self):
        assert parse_iso_date("31/01/2020") is None
        assert parse_iso_date("") is None
        assert parse_iso_date(None) is None

    def test_format_date(self):
        assert format_date("1985-02-01") == "01/02/1985"
        assert format_date(None) == "-"
        assert format_date("lixo") == "-"

    def test_format_competencia(self):
        assert format_competencia(date(2024, 1, 1)) == "jan/24"
        assert format_competencia(date(1995, 12, 1), long_year=True) == "dez/1995"
