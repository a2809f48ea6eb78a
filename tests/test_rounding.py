"""Cent rounding tests"""
from decimal import Decimal

import pytest

from ledger_engine.utils.rounding import round_cents, sum_cents, to_decimal


class TestToDecimal:

    def test_int(self):
        assert to_decimal(42) == Decimal("42")

    def test_numeric_string(self):
        assert to_decimal("123.45") == Decimal("123.45")

    def test_none_is_zero(self):
        assert to_decimal(None) == 0

    def test_float_uses_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(0.1 + 0.2) == Decimal("0.30000000000000004")

    def test_decimal_passes_through(self):
        d = Decimal("9.999")
        assert to_decimal(d) is d


class TestRoundCents:

    @pytest.mark.parametrize("value, expected", [
        ("1.005", "1.01"),
        ("1.004", "1.00"),
        ("-1.005", "-1.01"),
        ("-1.004", "-1.00"),
        ("2.675", "2.68"),
        (0.1 + 0.2, "0.30"),
        (1000, "1000.00"),
    ])
    def test_half_up_on_magnitude(self, value, expected):
        assert round_cents(value) == Decimal(expected)

    def test_always_two_places(self):
        assert round_cents(5).as_tuple().exponent == -2
        assert round_cents("3.14159").as_tuple().exponent == -2

    @pytest.mark.parametrize("value", [
        "0", "0.005", "-0.005", "123.456789", "-99999.995", 1e-9, 604.1666666, -0.015,
    ])
    def test_idempotent(self, value):
        once = round_cents(value)
        assert round_cents(once) == once

    def test_sum_rounds_once(self):
        assert sum_cents([0.1, 0.2]) == Decimal("0.30")
        assert sum_cents([]) == Decimal("0.00")
