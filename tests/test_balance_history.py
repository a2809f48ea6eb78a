"""Balance history and drift tests"""
from datetime import date
from decimal import Decimal

from ledger_engine.core.balance_history import (
    BalancePoint,
    balance_history_frame,
    compute_balance_history,
    compute_drift,
    summarize_monthly_deltas,
)
from ledger_engine.utils.date_utils import MonthKey


class TestComputeBalanceHistory:

    def test_walks_back_from_current_balance(self):
        # Feb ends at 1000; Feb added 300, so Jan ended at 700
        result = compute_balance_history(
            1000,
            {"2026-01": 200, "2026-02": 300},
            ["2026-01", "2026-02"],
        )
        assert result == [
            BalancePoint("2026-01", Decimal("700")),
            BalancePoint("2026-02", Decimal("1000")),
        ]

    def test_flat_when_no_deltas(self):
        result = compute_balance_history(500, {}, ["2026-01", "2026-02", "2026-03"])
        assert len(result) == 3
        assert all(p.balance == 500 for p in result)

    def test_single_month_applies_no_delta(self):
        result = compute_balance_history(1000, {"2026-01": 100}, ["2026-01"])
        assert result == [BalancePoint("2026-01", Decimal("1000.00"))]

    def test_empty_keys(self):
        assert compute_balance_history(1000, {}, []) == []

    def test_missing_months_are_flat(self):
        result = compute_balance_history(
            250,
            {"2026-03": -50},
            ["2026-01", "2026-02", "2026-03"],
        )
        assert [p.balance for p in result] == [Decimal("300"), Decimal("300"), Decimal("250")]

    def test_rounds_every_point(self):
        result = compute_balance_history(100.1 + 0.2, {"2026-02": 50.005}, ["2026-01", "2026-02"])
        for point in result:
            assert point.balance.as_tuple().exponent == -2
        assert result[1].balance == Decimal("100.30")
        assert result[0].balance == Decimal("50.30")

    def test_accepts_month_key_objects(self):
        result = compute_balance_history(
            10,
            {MonthKey(2026, 2): 4},
            [MonthKey(2026, 1), MonthKey(2026, 2)],
        )
        assert [p.month_key for p in result] == ["2026-01", "2026-02"]
        assert result[0].balance == Decimal("6")

    def test_string_keys_used_as_given(self):
        result = compute_balance_history(
            100,
            {"2026-2": 40, "closing": 10},
            ["2026-1", "2026-2", "closing"],
        )
        assert [p.month_key for p in result] == ["2026-1", "2026-2", "closing"]
        assert [p.balance for p in result] == [Decimal("50"), Decimal("90"), Decimal("100")]

    def test_preserves_caller_order(self):
        keys = ["2026-01", "2026-02", "2026-03", "2026-04"]
        result = compute_balance_history(0, {"2026-02": 10, "2026-04": -5}, keys)
        assert [p.month_key for p in result] == keys
        assert [p.balance for p in result] == [
            Decimal("-5"), Decimal("5"), Decimal("5"), Decimal("0"),
        ]


class TestComputeDrift:

    def test_zero_when_balances_match(self):
        assert compute_drift(100, 100) == 0

    def test_positive_when_calculated_higher(self):
        assert compute_drift(100, 105) == 5

    def test_negative_when_calculated_lower(self):
        assert compute_drift(100, 95) == -5

    def test_rounds_float_noise(self):
        assert compute_drift(0, 0.1 + 0.2) == Decimal("0.30")

    def test_large_difference(self):
        assert compute_drift(0, 1_000_000) == Decimal("1000000.00")


class TestSummarizeMonthlyDeltas:

    def test_groups_by_month(self):
        deltas = summarize_monthly_deltas([
            (date(2026, 1, 3), "-45.10"),
            (date(2026, 1, 15), 2000),
            (date(2026, 2, 1), -1200.5),
            {"date": "2026-02-20", "amount": "0.10"},
        ])
        assert deltas == {
            "2026-01": Decimal("1954.90"),
            "2026-02": Decimal("-1200.40"),
        }
        assert list(deltas) == ["2026-01", "2026-02"]

    def test_empty(self):
        assert summarize_monthly_deltas([]) == {}

    def test_feeds_history(self):
        deltas = summarize_monthly_deltas([
            (date(2026, 1, 10), 200),
            (date(2026, 2, 10), 300),
        ])
        history = compute_balance_history(1000, deltas, ["2026-01", "2026-02"])
        assert [p.balance for p in history] == [Decimal("700"), Decimal("1000")]


class TestBalanceHistoryFrame:

    def test_columns(self):
        points = compute_balance_history(500, {}, ["2026-01", "2026-02"])
        df = balance_history_frame(points)
        assert list(df.columns) == ["month_key", "balance"]
        assert df["month_key"].tolist() == ["2026-01", "2026-02"]

    def test_empty(self):
        df = balance_history_frame([])
        assert df.empty
        assert list(df.columns) == ["month_key", "balance"]
