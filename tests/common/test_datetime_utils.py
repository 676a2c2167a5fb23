from datetime import date, datetime, timedelta, timezone

import pytest

from mess_attendance.common.datetime_utils import as_utc, dates_in_month, iter_days, parse_iso_date, parse_year_month
from mess_attendance.core.exceptions import ValidationError


def test_parse_iso_date_accepts_strict_format():
    assert parse_iso_date("2025-03-10") == date(2025, 3, 10)


@pytest.mark.parametrize("value", ["2025-3-10", "2025-03-1", "10-03-2025", "2025/03/10", "2025-03-10T00:00", "", None, 20250310])
def test_parse_iso_date_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_iso_date(value)


def test_parse_iso_date_rejects_impossible_day():
    with pytest.raises(ValidationError):
        parse_iso_date("2025-02-30")


def test_parse_iso_date_rejects_datetime_values():
    with pytest.raises(ValidationError):
        parse_iso_date(datetime(2025, 3, 10, 8, 0))


def test_parse_year_month():
    assert parse_year_month("2025-03") == (2025, 3)
    with pytest.raises(ValidationError):
        parse_year_month("2025-3")
    with pytest.raises(ValidationError):
        parse_year_month("2025-13")


def test_as_utc_treats_naive_as_utc_and_converts_aware():
    assert as_utc(datetime(2025, 3, 9, 10, 0)) == datetime(2025, 3, 9, 10, 0, tzinfo=timezone.utc)
    ist = timezone(timedelta(hours=5, minutes=30))
    assert as_utc(datetime(2025, 3, 10, 0, 30, tzinfo=ist)) == datetime(2025, 3, 9, 19, 0, tzinfo=timezone.utc)


def test_dates_in_month_skips_excluded_days():
    days = dates_in_month("2024-02", exclude=["2024-02-10", "2024-02-29"])
    assert len(days) == 27
    assert days[0] == date(2024, 2, 1)
    assert date(2024, 2, 10) not in days


def test_iter_days_is_inclusive_and_stops_at_the_last_calendar_day():
    assert list(iter_days(date(2025, 3, 30), date(2025, 4, 1))) == [
        date(2025, 3, 30),
        date(2025, 3, 31),
        date(2025, 4, 1),
    ]
    assert list(iter_days(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]
    assert dates_in_month("9999-12")[-1] == date.max
