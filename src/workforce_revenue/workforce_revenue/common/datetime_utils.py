from __future__ import annotations

from datetime import date, datetime
from typing import Iterator, Union

from ..core.constants import MONTH_LABEL_FORMAT
from ..core.exceptions import ValidationError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (optionally with a time part) into date."""
    text = str(value).strip()
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def month_start(value: DateLike) -> date:
    d = as_date(value)
    return d.replace(day=1)


def month_label(value: DateLike) -> str:
    """``date(2025, 1, 31)`` -> ``"Jan 2025"``."""
    return month_start(value).strftime(MONTH_LABEL_FORMAT)


def iter_months(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield the first day of every month touched by [start, end], inclusive."""
    current = month_start(start)
    last = month_start(end)
    while current <= last:
        yield current
        if current.month == 12:
            current = current.replace(year=current.year + 1, month=1)
        else:
            current = current.replace(month=current.month + 1)
