from datetime import date, datetime

import pytest

from ledger_engine.utils.date_utils import (
    MonthKey,
    clamp_day,
    get_month_key,
    month_key_str,
    month_keys_between,
    trailing_month_keys,
)


class TestMonthKey:

    def test_string_form(self):
        assert str(MonthKey(2026, 1)) == "2026-01"

    def test_parse(self):
        assert MonthKey.parse("2025-12") == MonthKey(2025, 12)

    def test_parse_rejects_bad_month(self):
        with pytest.raises(ValueError):
            MonthKey.parse("2025-13")

    def test_shift_across_year(self):
        assert MonthKey(2025, 11).shift(3) == MonthKey(2026, 2)
        assert MonthKey(2026, 1).shift(-1) == MonthKey(2025, 12)

    def test_month_key_str_keeps_strings(self):
        assert month_key_str("2026-1") == "2026-1"
        assert month_key_str("FY26-Q1") == "FY26-Q1"
        assert month_key_str(MonthKey(2026, 3)) == "2026-03"


class TestMonthKeyHelpers:

    def test_get_month_key(self):
        assert get_month_key(date(2026, 2, 28)) == "2026-02"
        assert get_month_key(datetime(2026, 2, 28, 23, 59)) == "2026-02"
        assert get_month_key("2026-02-14") == "2026-02"

    def test_between_inclusive(self):
        assert month_keys_between(date(2025, 11, 20), date(2026, 2, 1)) == [
            "2025-11", "2025-12", "2026-01", "2026-02",
        ]

    def test_trailing(self):
        assert trailing_month_keys(date(2026, 2, 10), 3) == ["2025-12", "2026-01", "2026-02"]

    def test_clamp_day(self):
        assert clamp_day(2026, 2, 31) == date(2026, 2, 28)
        assert clamp_day(2024, 2, 31) == date(2024, 2, 29)
