from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Iterable, Optional, Sequence

from mysql.connector import errors

from ..common.datetime_utils import as_utc, month_bounds
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceRecord, Meals
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_COLUMNS = "attendance_id, user_id, day, morning, noon, night, created_at, updated_at"


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    # DATETIME columns come back naive; the connection runs in UTC.
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        day=r["day"],
        meals=Meals(morning=bool(r["morning"]), noon=bool(r["noon"]), night=bool(r["night"])),
        created_at=_utc(r.get("created_at")),
        updated_at=_utc(r.get("updated_at")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select_one(self, cur, user_id: int, day: date, *, for_update: bool = False) -> Optional[AttendanceRecord]:
        # FOR UPDATE reads the latest committed row instead of the transaction snapshot.
        lock = "FOR UPDATE" if for_update else ""
        cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM meal_attendance
            WHERE user_id=%s AND day=%s
            {lock}
            """,
            (user_id, day),
        )
        r = fetchone(cur)
        return _to_record(r) if r else None

    def _update_meals(self, cur, *, user_id: int, day: date, meals: Meals, stamp: datetime) -> None:
        cur.execute(
            """
            UPDATE meal_attendance
            SET morning=%s, noon=%s, night=%s, updated_at=%s
            WHERE user_id=%s AND day=%s
            """,
            (int(meals.morning), int(meals.noon), int(meals.night), stamp, user_id, day),
        )

    def get(self, user_id: int, day: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, user_id, day)

    def upsert(self, *, user_id: int, day: date, meals: Meals, now: datetime) -> AttendanceRecord:
        stamp = as_utc(now).replace(tzinfo=None)

        with db_cursor(self._conn_factory) as (_, cur):
            existing = self._select_one(cur, user_id, day)
            if existing is not None:
                self._update_meals(cur, user_id=user_id, day=day, meals=meals, stamp=stamp)
            else:
                try:
                    cur.execute(
                        """
                        INSERT INTO meal_attendance(user_id, day, morning, noon, night, created_at, updated_at)
                        VALUES(%s,%s,%s,%s,%s,%s,%s)
                        """,
                        (user_id, day, int(meals.morning), int(meals.noon), int(meals.night), stamp, stamp),
                    )
                except errors.IntegrityError as exc:
                    if not is_duplicate_key(exc):
                        raise
                    # Lost the first-insert race: the row exists now, apply ours on top of it.
                    logger.warning("Concurrent first mark for user=%s day=%s, retrying as update", user_id, day)
                    self._update_meals(cur, user_id=user_id, day=day, meals=meals, stamp=stamp)

            record = self._select_one(cur, user_id, day, for_update=True)
            if record is None:
                raise RuntimeError(f"Attendance for user={user_id} day={day} vanished after upsert")
            return record

    def list_for_month(self, user_id: int, year: int, month: int) -> Sequence[AttendanceRecord]:
        first, last = month_bounds(year, month)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM meal_attendance
                WHERE user_id=%s AND day BETWEEN %s AND %s
                ORDER BY day ASC
                """,
                (user_id, first, last),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_dates(self, days: Iterable[date]) -> Sequence[AttendanceRecord]:
        wanted = sorted(set(days))
        if not wanted:
            return []

        placeholders = ",".join(["%s"] * len(wanted))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM meal_attendance
                WHERE day IN ({placeholders})
                ORDER BY day ASC, user_id ASC
                """,
                tuple(wanted),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM meal_attendance
                WHERE day BETWEEN %s AND %s
                ORDER BY day ASC, user_id ASC
                """,
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]
