from decimal import Decimal, InvalidOperation
from typing import List, Tuple

from ledger_engine.config.settings import DEFAULT_MAX_MONTHS
from ledger_engine.utils.date_utils import MonthKey, MonthKeyLike
from ledger_engine.utils.rounding import to_decimal


def _finite(value) -> Tuple[bool, Decimal]:
    try:
        d = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return False, Decimal(0)
    return d.is_finite(), d


def validate_loan_terms(
    balance,
    annual_rate,
    monthly_payment,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> Tuple[bool, str]:
    """Check loan inputs before simulating, returns (ok, error message)"""
    ok, _ = _finite(balance)
    if not ok:
        return False, "Balance must be a finite number"

    ok, rate = _finite(annual_rate)
    if not ok:
        return False, "APR must be a finite number"
    if rate < 0:
        return False, "APR cannot be negative"
    if rate > 100:
        return False, "APR must be between 0 and 100%"

    ok, payment = _finite(monthly_payment)
    if not ok:
        return False, "Monthly payment must be a finite number"
    if payment <= 0:
        return False, "Monthly payment must be greater than 0"

    if not isinstance(max_months, int) or max_months <= 0:
        return False, "Month cap must be a positive whole number"

    return True, ""


def validate_standard_loan(principal, annual_rate, term_months: int) -> Tuple[bool, str]:
    ok, amount = _finite(principal)
    if not ok:
        return False, "Principal must be a finite number"
    if amount <= 0:
        return False, "Principal must be greater than 0"

    ok, rate = _finite(annual_rate)
    if not ok or not 0 <= rate <= 100:
        return False, "APR must be between 0 and 100%"

    if not isinstance(term_months, int) or term_months <= 0:
        return False, "Loan term must be a positive number of months"

    return True, ""


def validate_extra_payment(extra_amount) -> Tuple[bool, str]:
    ok, extra = _finite(extra_amount)
    if not ok:
        return False, "Extra payment must be a finite number"
    if extra < 0:
        return False, "Extra payment cannot be negative"
    return True, ""


def validate_credit_limit(credit_limit) -> Tuple[bool, str]:
    ok, limit = _finite(credit_limit)
    if not ok:
        return False, "Credit limit must be a finite number"
    if limit < 0:
        return False, "Credit limit cannot be negative"
    return True, ""


def validate_month_keys(keys: List[MonthKeyLike]) -> Tuple[bool, str]:
    """Keys must parse as YYYY-MM and be strictly chronological"""
    parsed = []
    for key in keys:
        if isinstance(key, MonthKey):
            parsed.append(key)
            continue
        try:
            parsed.append(MonthKey.parse(key))
        except (ValueError, AttributeError):
            return False, f"Invalid month key: {key!r}"

    for earlier, later in zip(parsed, parsed[1:]):
        if later <= earlier:
            return False, f"Month keys out of order: {earlier} before {later}"

    return True, ""
