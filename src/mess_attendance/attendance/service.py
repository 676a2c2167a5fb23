from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import iter_days, month_bounds, parse_iso_date, parse_year_month, utc_now
from ..common.validators import require_meal_flags, require_present
from ..core.exceptions import PolicyError
from .model import AttendanceRecord, DayMeals, Meals, effective_meals
from .policy import MarkingWindowPolicy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Entry point for residents marking meals; enforces the window before writing."""

    def __init__(self, attendance: AttendanceRepository, *, policy: Optional[MarkingWindowPolicy] = None):
        self._attendance = attendance
        self._policy = policy or MarkingWindowPolicy()

    @property
    def policy(self) -> MarkingWindowPolicy:
        return self._policy

    def mark(
        self,
        user_id: int,
        day: str | date,
        meals: Mapping[str, Any],
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or utc_now()

        require_present(user_id, "userId")
        target = parse_iso_date(require_present(day, "date"))
        flags = Meals.from_mapping(require_meal_flags(require_present(meals, "meals")))

        try:
            self._policy.check(target, now)
        except PolicyError as e:
            logger.info("Rejected mark user=%s day=%s: %s", user_id, target, e.code)
            raise

        record = self._attendance.upsert(user_id=user_id, day=target, meals=flags, now=now)
        logger.info("Marked user=%s day=%s meals=%s", user_id, target, flags.to_dict())
        return record

    def get_month(self, user_id: int, year_month: str) -> list[AttendanceRecord]:
        """Explicitly marked days only; unmarked days are implicitly fully present."""
        year, month = parse_year_month(year_month)
        rows = self._attendance.list_for_month(user_id, year, month)
        return sorted(rows, key=lambda r: r.day)

    def get_month_calendar(self, user_id: int, year_month: str) -> list[DayMeals]:
        year, month = parse_year_month(year_month)
        by_day = {r.day: r for r in self._attendance.list_for_month(user_id, year, month)}
        first, last = month_bounds(year, month)
        return [
            DayMeals(day=d, meals=effective_meals(by_day.get(d)), marked=d in by_day)
            for d in iter_days(first, last)
        ]

    def get_day(self, user_id: int, day: str | date) -> DayMeals:
        target = parse_iso_date(day)
        record = self._attendance.get(user_id, target)
        return DayMeals(day=target, meals=effective_meals(record), marked=record is not None)
