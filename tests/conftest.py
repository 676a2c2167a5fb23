from __future__ import annotations

from datetime import datetime, timezone

import pytest

from fakes import InMemoryAttendance, InMemoryUsers, subject
from mess_attendance.attendance.policy import MarkingWindowPolicy
from mess_attendance.attendance.service import AttendanceService
from mess_attendance.reports.service import MessCutReportService


@pytest.fixture
def fixed_now() -> datetime:
    # Sunday 2025-03-09, 10:00 UTC: 2025-03-10 is markable until 19:00 today.
    return datetime(2025, 3, 9, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def roster():
    return [subject(1, "Anu"), subject(2, "Basil"), subject(3, "Chitra")]


@pytest.fixture
def users_repo(roster) -> InMemoryUsers:
    return InMemoryUsers(roster)


@pytest.fixture
def attendance_service(attendance_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, policy=MarkingWindowPolicy())


@pytest.fixture
def report_service(attendance_repo, users_repo) -> MessCutReportService:
    return MessCutReportService(attendance_repo, users_repo)
