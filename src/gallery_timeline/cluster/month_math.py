"""Calendar helpers shared by the grouping stages."""

from __future__ import annotations

import calendar
from datetime import datetime


def month_key(d: datetime) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def range_label(start: datetime, end: datetime) -> str:
    """Return the `YYYY-MM to YYYY-MM` label for a span."""
    return f"{month_key(start)} to {month_key(end)}"


def month_bounds(key: str) -> tuple[datetime, datetime]:
    """Return the first instant and the last millisecond of month `key`.

    Works for any year a `datetime` can hold (0001 to 9999).

    Args:
        key: Month in `YYYY-MM` form.
    """
    year, month = (int(part) for part in key.split("-"))
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime(year, month, last_day, 23, 59, 59, 999000)


def midpoint(start: datetime, end: datetime) -> datetime:
    return start + (end - start) / 2


def months_between(earlier: datetime, later: datetime) -> int:
    """Whole calendar months from `earlier`'s month to `later`'s month.

    Feb -> Aug is 6 regardless of the days involved.
    """
    return (later.year - earlier.year) * 12 + (later.month - earlier.month)


def same_month(a: datetime, b: datetime) -> bool:
    return (a.year, a.month) == (b.year, b.month)
