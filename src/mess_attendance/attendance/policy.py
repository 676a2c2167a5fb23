from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from ..common.datetime_utils import as_utc, parse_clock_time
from ..core.constants import DEFAULT_ADVANCE_DAYS, DEFAULT_DEADLINE_TIME
from ..core.exceptions import DeadlinePassedError, TooFarInAdvanceError


@dataclass(frozen=True)
class MarkingWindowPolicy:
    """When a day's meals may still be marked.

    A day can be marked until ``deadline_time`` (UTC) on the previous day, and
    no further ahead than ``advance_days`` after today. Every comparison is
    made in UTC so two servers never disagree about the same request.
    """

    deadline_time: time = parse_clock_time(DEFAULT_DEADLINE_TIME)
    advance_days: int = DEFAULT_ADVANCE_DAYS

    @classmethod
    def from_settings(cls, *, deadline_time: str, advance_days: int) -> "MarkingWindowPolicy":
        if int(advance_days) < 0:
            raise ValueError("advance_days must not be negative")
        return cls(deadline_time=parse_clock_time(deadline_time), advance_days=int(advance_days))

    def deadline_for(self, day: date) -> datetime:
        if day == date.min:
            # No previous day to close on; the deadline is already behind us.
            return datetime.min.replace(tzinfo=timezone.utc)
        return datetime.combine(day - timedelta(days=1), self.deadline_time, tzinfo=timezone.utc)

    def is_within_advance_window(self, day: date, today: date) -> bool:
        return today <= day <= today + timedelta(days=self.advance_days)

    def can_mark(self, day: date, now: datetime) -> bool:
        now = as_utc(now)
        return now <= self.deadline_for(day) and self.is_within_advance_window(day, now.date())

    def check(self, day: date, now: datetime) -> None:
        """Raise the rule that forbids marking ``day`` at ``now``, if any."""
        now = as_utc(now)
        if now > self.deadline_for(day):
            raise DeadlinePassedError(day)
        if not self.is_within_advance_window(day, now.date()):
            raise TooFarInAdvanceError(day, self.advance_days)

    def first_markable_day(self, now: datetime) -> date:
        now = as_utc(now)
        candidate = now.date()
        while now > self.deadline_for(candidate):
            candidate += timedelta(days=1)
        return candidate

    def describe(self, now: datetime) -> dict:
        """Policy as served to clients, so calendars never hardcode it."""
        now = as_utc(now)
        today = now.date()
        return {
            "deadline_time": self.deadline_time.strftime("%H:%M"),
            "timezone": "UTC",
            "advance_days": self.advance_days,
            "today": today.isoformat(),
            "first_markable_day": self.first_markable_day(now).isoformat(),
            "last_markable_day": (today + timedelta(days=self.advance_days)).isoformat(),
        }
