from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional, Protocol, Sequence

from .model import AttendanceRecord, Meals


class AttendanceRepository(Protocol):
    """Repository interface for meal attendance records.

    Note (DIP): services depend on this interface, not on a concrete database.
    Implementations must keep one record per (user_id, day).
    """

    def get(self, user_id: int, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, *, user_id: int, day: date, meals: Meals, now: datetime) -> AttendanceRecord:
        """Create the record or replace its meals; returns the persisted record.

        A concurrent first insert for the same key must resolve to a single
        record without raising to either caller.
        """

        raise NotImplementedError

    def list_for_month(self, user_id: int, year: int, month: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_dates(self, days: Iterable[date]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
