"""Interest accrual math for savings and credit card accounts"""
from datetime import date
from decimal import Decimal
from typing import Iterable

from dateutil.relativedelta import relativedelta

from ledger_engine.config.settings import DAYS_PER_YEAR, MONTHS_PER_YEAR
from ledger_engine.utils.date_utils import clamp_day
from ledger_engine.utils.rounding import round_cents, to_decimal


def calc_monthly_savings_interest(balance, apy) -> Decimal:
    """balance * apy / 12, in cents; nothing accrues on an empty or overdrawn balance"""
    balance = to_decimal(balance)
    apy = to_decimal(apy)
    if balance <= 0 or apy <= 0:
        return Decimal("0.00")
    return round_cents(balance * (apy / 100 / MONTHS_PER_YEAR))


def calc_daily_interest(amount, apr) -> Decimal:
    """One day of interest on |amount|, unrounded"""
    return abs(to_decimal(amount)) * to_decimal(apr) / 100 / DAYS_PER_YEAR


def calc_daily_accrual(amounts: Iterable, apr) -> Decimal:
    """Total daily interest over a set of balances, rounded once"""
    total = sum((calc_daily_interest(a, apr) for a in amounts), Decimal(0))
    return round_cents(total)


def last_statement_close_date(today: date, statement_close_day: int) -> date:
    """
    Most recent statement close on or before today.

    close day 15: Feb 20 -> Feb 15, Feb 10 -> Jan 15, Feb 15 -> Feb 15.
    Close days past the end of a month fall on its last day.
    """
    this_month = clamp_day(today.year, today.month, statement_close_day)
    if today >= this_month:
        return this_month
    prev = today + relativedelta(months=-1)
    return clamp_day(prev.year, prev.month, statement_close_day)


def should_charge_interest(
    tx_date: date,
    today: date,
    statement_close_day: int,
    last_statement_paid_in_full: bool,
) -> bool:
    """
    Grace period rule.

    When the last statement was paid in full, purchases posted after the
    last close are interest-free. Otherwise every purchase accrues.
    """
    if not last_statement_paid_in_full:
        return True
    return tx_date <= last_statement_close_date(today, statement_close_day)
