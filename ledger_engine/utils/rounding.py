"""Cent rounding and numeric coercion shared by every calculation."""
from decimal import Decimal, ROUND_HALF_UP

from ledger_engine.config.settings import CENT


def to_decimal(value) -> Decimal:
    """Coerce a number, numeric string or None to Decimal (None -> 0)."""
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr gives the shortest round-tripping string: 0.1 -> "0.1"
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(value)


def round_cents(value) -> Decimal:
    """Round to the nearest cent, half away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_cents(values) -> Decimal:
    """Exact sum of the values, rounded once at the end."""
    return round_cents(sum((to_decimal(v) for v in values), Decimal(0)))
