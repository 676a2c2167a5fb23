from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator

from ..core.constants import DATE_FORMAT, MONTH_FORMAT
from ..core.exceptions import ValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")
_CLOCK_RE = re.compile(r"^\d{2}:\d{2}$")


def parse_iso_date(value: str | date) -> date:
    """Parse a strict YYYY-MM-DD string into a date.

    strptime alone accepts '2025-3-1', so the shape is checked first.
    """
    if isinstance(value, datetime):
        raise ValidationError("Date must not carry a time of day")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(f"Invalid calendar date {value!r}") from exc


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse a strict YYYY-MM string into (year, month)."""
    if not isinstance(value, str) or not _MONTH_RE.match(value):
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    try:
        parsed = datetime.strptime(value, MONTH_FORMAT)
    except ValueError as exc:
        raise ValidationError(f"Invalid month {value!r}") from exc
    return parsed.year, parsed.month


def parse_clock_time(value: str) -> time:
    """Parse HH:MM (24h) used by the deadline setting."""
    if not _CLOCK_RE.match(value or ""):
        raise ValueError(f"Invalid clock time {value!r}, expected HH:MM")
    return datetime.strptime(value, "%H:%M").time()


def utc_now() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize an instant to aware UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        if current == end:
            break
        current += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def dates_in_month(year_month: str, *, exclude=()) -> list[date]:
    """All days of a month, minus excluded days (holidays, closures)."""
    year, month = parse_year_month(year_month)
    skip = {parse_iso_date(d) for d in exclude}
    first, last = month_bounds(year, month)
    return [d for d in iter_days(first, last) if d not in skip]
