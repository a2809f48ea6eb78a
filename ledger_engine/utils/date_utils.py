import calendar
from datetime import date, datetime
from typing import List, NamedTuple, Union

from dateutil.relativedelta import relativedelta


class MonthKey(NamedTuple):
    """A calendar month, written "YYYY-MM"."""
    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @classmethod
    def parse(cls, text: str) -> "MonthKey":
        year, _, month = text.strip().partition("-")
        key = cls(int(year), int(month))
        if not 1 <= key.month <= 12:
            raise ValueError(f"invalid month key: {text!r}")
        return key

    @classmethod
    def from_date(cls, d: date) -> "MonthKey":
        return cls(d.year, d.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def shift(self, months: int) -> "MonthKey":
        return MonthKey.from_date(self.first_day() + relativedelta(months=months))


MonthKeyLike = Union[MonthKey, str]


def month_key_str(key: MonthKeyLike) -> str:
    """String form of a key; string keys are used as given."""
    if isinstance(key, MonthKey):
        return str(key)
    return key


def get_month_key(d) -> str:
    if isinstance(d, str):
        d = date.fromisoformat(d[:10])
    if isinstance(d, datetime):
        d = d.date()
    return str(MonthKey.from_date(d))


def month_keys_between(start: date, end: date) -> List[str]:
    """Every month key from start's month to end's month, inclusive."""
    first = MonthKey.from_date(start)
    last = MonthKey.from_date(end)
    keys = []
    current = first
    while current <= last:
        keys.append(str(current))
        current = current.shift(1)
    return keys


def trailing_month_keys(end: date, count: int) -> List[str]:
    """The last `count` month keys ending with end's month, oldest first."""
    last = MonthKey.from_date(end)
    return [str(last.shift(-i)) for i in range(count - 1, -1, -1)]


def clamp_day(year: int, month: int, day: int) -> date:
    """date(year, month, day) with day limited to the month's length"""
    max_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, max_day))
