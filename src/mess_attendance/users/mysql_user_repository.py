from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Subject
from .repository import UserRepository


def _to_subject(row: dict) -> Subject:
    return Subject(
        user_id=int(row["user_id"]),
        full_name=row["full_name"],
        email=row["email"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, role, is_active
                FROM users
                WHERE user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            return _to_subject(row) if row else None

    def list_roster(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, email, role, is_active
                FROM users
                WHERE role=%s AND is_active=1
                ORDER BY full_name ASC, user_id ASC
                """,
                (Role.STUDENT.value,),
            )
            return [_to_subject(r) for r in fetchall(cur)]
