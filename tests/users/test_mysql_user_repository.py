from __future__ import annotations

from mess_attendance.core.enums import Role
from mess_attendance.users.mysql_user_repository import MySQLUserRepository


class StubCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class StubConnection:
    def __init__(self, cursor):
        self._cursor = cursor

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class StubFactory:
    def __init__(self, rows):
        self.cursor = StubCursor(rows)

    def connect(self):
        return StubConnection(self.cursor)


def test_list_roster_reads_active_students():
    factory = StubFactory(
        [
            {"user_id": 4, "full_name": "Anu", "email": "anu@hostel.test", "role": "student", "is_active": 1},
            {"user_id": 2, "full_name": "Basil", "email": "basil@hostel.test", "role": "student", "is_active": 1},
        ]
    )

    roster = MySQLUserRepository(factory).list_roster()

    assert [s.user_id for s in roster] == [4, 2]
    assert roster[0].role == Role.STUDENT
    sql, params = factory.cursor.executed[0]
    assert "is_active=1" in sql and "ORDER BY full_name" in sql
    assert params == ("student",)


def test_get_by_id_missing_returns_none():
    assert MySQLUserRepository(StubFactory([])).get_by_id(9) is None
