from datetime import date, datetime, timedelta, timezone

import pytest

from mess_attendance.attendance.policy import MarkingWindowPolicy
from mess_attendance.core.exceptions import DeadlinePassedError, TooFarInAdvanceError

UTC = timezone.utc


def test_deadline_is_evening_before_in_utc():
    policy = MarkingWindowPolicy()
    assert policy.deadline_for(date(2025, 3, 10)) == datetime(2025, 3, 9, 19, 0, tzinfo=UTC)


def test_deadline_crosses_month_boundary():
    policy = MarkingWindowPolicy()
    assert policy.deadline_for(date(2025, 3, 1)) == datetime(2025, 2, 28, 19, 0, tzinfo=UTC)


def test_first_calendar_day_is_always_past_its_deadline(fixed_now):
    policy = MarkingWindowPolicy()

    assert not policy.can_mark(date.min, fixed_now)
    with pytest.raises(DeadlinePassedError):
        policy.check(date.min, fixed_now)


def test_advance_window_is_inclusive_on_both_ends():
    policy = MarkingWindowPolicy()
    today = date(2025, 3, 9)
    assert policy.is_within_advance_window(today, today)
    assert policy.is_within_advance_window(today + timedelta(days=7), today)
    assert not policy.is_within_advance_window(today + timedelta(days=8), today)
    assert not policy.is_within_advance_window(today - timedelta(days=1), today)


def test_can_mark_until_exactly_the_deadline():
    policy = MarkingWindowPolicy()
    day = date(2025, 3, 10)
    assert policy.can_mark(day, datetime(2025, 3, 9, 19, 0, tzinfo=UTC))
    assert not policy.can_mark(day, datetime(2025, 3, 9, 19, 0, 1, tzinfo=UTC))


def test_today_can_never_be_marked():
    policy = MarkingWindowPolicy()
    assert not policy.can_mark(date(2025, 3, 9), datetime(2025, 3, 9, 0, 0, tzinfo=UTC))


def test_local_offsets_are_compared_in_utc():
    policy = MarkingWindowPolicy()
    ist = timezone(timedelta(hours=5, minutes=30))
    # 00:10 IST on the 10th is 18:40 UTC on the 9th: still before the deadline.
    assert policy.can_mark(date(2025, 3, 10), datetime(2025, 3, 10, 0, 10, tzinfo=ist))


def test_check_reports_deadline_before_window(fixed_now):
    policy = MarkingWindowPolicy()
    with pytest.raises(DeadlinePassedError) as exc:
        policy.check(date(2025, 3, 1), fixed_now)
    assert "2025-03-01" in str(exc.value)


def test_check_rejects_more_than_horizon_ahead(fixed_now):
    policy = MarkingWindowPolicy()
    policy.check(date(2025, 3, 16), fixed_now)
    with pytest.raises(TooFarInAdvanceError):
        policy.check(date(2025, 3, 17), fixed_now)


def test_settings_configure_deadline_and_horizon(fixed_now):
    policy = MarkingWindowPolicy.from_settings(deadline_time="09:30", advance_days=2)
    assert policy.deadline_for(date(2025, 3, 10)) == datetime(2025, 3, 9, 9, 30, tzinfo=UTC)
    assert not policy.can_mark(date(2025, 3, 10), fixed_now)
    assert policy.can_mark(date(2025, 3, 11), fixed_now)
    assert not policy.can_mark(date(2025, 3, 12), fixed_now)


def test_settings_reject_bad_values():
    with pytest.raises(ValueError):
        MarkingWindowPolicy.from_settings(deadline_time="7pm", advance_days=7)
    with pytest.raises(ValueError):
        MarkingWindowPolicy.from_settings(deadline_time="19:00", advance_days=-1)


def test_describe_exposes_markable_range(fixed_now):
    info = MarkingWindowPolicy().describe(fixed_now)
    assert info == {
        "deadline_time": "19:00",
        "timezone": "UTC",
        "advance_days": 7,
        "today": "2025-03-09",
        "first_markable_day": "2025-03-10",
        "last_markable_day": "2025-03-16",
    }


def test_describe_after_deadline_moves_first_markable_day():
    info = MarkingWindowPolicy().describe(datetime(2025, 3, 9, 20, 0, tzinfo=UTC))
    assert info["first_markable_day"] == "2025-03-11"
