from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.policy import MarkingWindowPolicy
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ADVANCE_DAYS, DEFAULT_CONNECT_TIMEOUT, DEFAULT_DEADLINE_TIME
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import MessCutReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    users_repo: UserRepository

    attendance_service: AttendanceService
    report_service: MessCutReportService


def build_services(
    attendance_repo: AttendanceRepository,
    users_repo: UserRepository,
    *,
    policy: MarkingWindowPolicy,
) -> Container:
    return Container(
        attendance_repo=attendance_repo,
        users_repo=users_repo,
        attendance_service=AttendanceService(attendance_repo, policy=policy),
        report_service=MessCutReportService(attendance_repo, users_repo),
    )


def db_config_from_settings(db_config: dict) -> DBConfig:
    return DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        connect_timeout=int(db_config.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT)),
    )


def build_container(
    *,
    db_config: dict,
    deadline_time: str = DEFAULT_DEADLINE_TIME,
    advance_days: int = DEFAULT_ADVANCE_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(db_config_from_settings(db_config))
    policy = MarkingWindowPolicy.from_settings(deadline_time=deadline_time, advance_days=advance_days)
    return build_services(MySQLAttendanceRepository(conn), MySQLUserRepository(conn), policy=policy)
