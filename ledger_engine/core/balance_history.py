"""
Balance history reconstruction and drift detection.

History is rebuilt backwards from the current stored balance: the last
month ends at the current balance, and each earlier month ends at the next
month's balance minus the net amount posted during that next month.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping

import pandas as pd

from ledger_engine.config.constants import BALANCE_HISTORY_COLUMNS
from ledger_engine.utils.date_utils import MonthKeyLike, get_month_key, month_key_str
from ledger_engine.utils.logging_config import get_logger
from ledger_engine.utils.rounding import round_cents, to_decimal

logger = get_logger(__name__)


@dataclass(frozen=True)
class BalancePoint:
    month_key: str
    balance: Decimal


def compute_balance_history(
    current_balance,
    monthly_deltas: Mapping[MonthKeyLike, object],
    ordered_month_keys: List[MonthKeyLike],
) -> List[BalancePoint]:
    """End-of-month balances for ordered_month_keys, oldest first"""
    deltas = {month_key_str(k): to_decimal(v) for k, v in monthly_deltas.items()}
    keys = [month_key_str(k) for k in ordered_month_keys]

    history: List[BalancePoint] = []
    running = round_cents(current_balance)
    for key in reversed(keys):
        history.append(BalancePoint(month_key=key, balance=running))
        running = round_cents(running - deltas.get(key, Decimal(0)))
    history.reverse()
    return history


def compute_drift(stored_balance, calculated_balance) -> Decimal:
    """calculated - stored, in cents. Positive means the stored balance is too low."""
    return round_cents(to_decimal(calculated_balance) - to_decimal(stored_balance))


def _transaction_record(txn) -> dict:
    if isinstance(txn, Mapping):
        tx_date, amount = txn["date"], txn["amount"]
    else:
        tx_date, amount = txn
    return {"month_key": get_month_key(tx_date), "amount": to_decimal(amount)}


def summarize_monthly_deltas(transactions: Iterable) -> Dict[str, Decimal]:
    """
    Net posted amount per month.

    transactions: (date, amount) pairs or mappings with "date" and "amount".
    Returns {"YYYY-MM": net amount} in month order.
    """
    records = [_transaction_record(t) for t in transactions]
    if not records:
        logger.debug("monthly_deltas_empty")
        return {}

    df = pd.DataFrame(records)
    totals = (
        df.groupby("month_key", sort=True)["amount"]
        .agg(lambda amounts: sum(amounts, Decimal(0)))
    )
    return {key: round_cents(total) for key, total in totals.items()}


def balance_history_frame(points: List[BalancePoint]) -> pd.DataFrame:
    """History as a two-column DataFrame for the chart layer"""
    rows = [{"month_key": p.month_key, "balance": p.balance} for p in points]
    return pd.DataFrame(rows, columns=BALANCE_HISTORY_COLUMNS)
