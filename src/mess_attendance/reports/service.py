from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord, effective_meals
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iter_days, parse_iso_date
from ..core.enums import Meal
from ..core.exceptions import ValidationError
from ..users.model import Subject
from ..users.repository import UserRepository
from .model import CutDay, CutReport, CutTotal, DailySummary, MealCounts, SummaryDetail

logger = logging.getLogger(__name__)


class MessCutReportService:
    """Aggregates raw attendance into admin summaries and mess cut reports.

    Read-only: never writes to the attendance store. When ``roster`` is not
    given, the active student roster is loaded from the users repository.
    """

    def __init__(self, attendance: AttendanceRepository, users: Optional[UserRepository] = None):
        self._attendance = attendance
        self._users = users

    def _roster(self, roster: Optional[Sequence[Subject]]) -> Sequence[Subject]:
        if roster is not None:
            return roster
        if self._users is None:
            raise ValueError("No roster given and no users repository configured")
        return self._users.list_roster()

    def daily_summary(self, day: str | date, roster: Optional[Sequence[Subject]] = None) -> DailySummary:
        target = parse_iso_date(day)
        subjects = self._roster(roster)

        by_user = {r.user_id: r for r in self._attendance.list_for_dates([target]) if r.day == target}

        absent = {meal: 0 for meal in Meal}
        details: list[SummaryDetail] = []
        for s in subjects:
            meals = effective_meals(by_user.get(s.user_id))
            for meal in Meal:
                if meals.is_absent(meal):
                    absent[meal] += 1
            details.append(
                SummaryDetail(
                    user_id=s.user_id,
                    full_name=s.full_name,
                    morning_absent=meals.is_absent(Meal.MORNING),
                    noon_absent=meals.is_absent(Meal.NOON),
                    night_absent=meals.is_absent(Meal.NIGHT),
                )
            )

        logger.info("Daily summary for %s over %d subjects", target, len(subjects))
        return DailySummary(
            day=target,
            summary=MealCounts(morning=absent[Meal.MORNING], noon=absent[Meal.NOON], night=absent[Meal.NIGHT]),
            details=details,
        )

    def range_cut_report(self, dates: Iterable[str | date], roster: Optional[Sequence[Subject]] = None) -> CutReport:
        days = sorted({parse_iso_date(d) for d in (dates or [])})
        if not days:
            raise ValidationError("Select at least one date for the report")

        return self._build_cut_report(days, self._attendance.list_for_dates(days), self._roster(roster))

    def range_cut_report_between(
        self,
        start: str | date,
        end: str | date,
        roster: Optional[Sequence[Subject]] = None,
    ) -> CutReport:
        first = parse_iso_date(start)
        last = parse_iso_date(end)
        if first > last:
            raise ValidationError("Start date must not be after end date")
        days = list(iter_days(first, last))
        return self._build_cut_report(days, self._attendance.list_for_date_range(first, last), self._roster(roster))

    def _build_cut_report(
        self,
        days: list[date],
        records: Iterable[AttendanceRecord],
        subjects: Sequence[Subject],
    ) -> CutReport:
        wanted = set(days)

        # Only an explicit all-false record is a cut; missing records mean present.
        cut_days: dict[int, set[date]] = {}
        for r in records:
            if r.day in wanted and r.is_cut:
                cut_days.setdefault(r.user_id, set()).add(r.day)

        summary: list[CutTotal] = []
        details: list[CutDay] = []
        for s in subjects:
            own = sorted(cut_days.get(s.user_id, ()))
            summary.append(CutTotal(user_id=s.user_id, full_name=s.full_name, total_cuts=len(own)))
            details.extend(CutDay(user_id=s.user_id, full_name=s.full_name, day=d) for d in own)

        logger.info(
            "Cut report for %d day(s) %s..%s: %d cut(s) over %d subjects",
            len(days), days[0], days[-1], len(details), len(subjects),
        )
        return CutReport(dates=days, summary=summary, details=details)
