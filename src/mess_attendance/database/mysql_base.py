from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errors

from ..core.constants import ER_DUP_ENTRY, ER_LOCK_DEADLOCK, ER_LOCK_WAIT_TIMEOUT
from ..core.exceptions import StoreUnavailableError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_TRANSIENT_ERRNOS = {ER_LOCK_DEADLOCK, ER_LOCK_WAIT_TIMEOUT}


def is_duplicate_key(exc: BaseException) -> bool:
    return isinstance(exc, errors.IntegrityError) and getattr(exc, "errno", None) == ER_DUP_ENTRY


def is_transient(exc: BaseException) -> bool:
    if isinstance(exc, (errors.OperationalError, errors.InterfaceError)):
        return True
    return isinstance(exc, mysql.connector.Error) and getattr(exc, "errno", None) in _TRANSIENT_ERRNOS


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction: commit on success, rollback on any error.

    Connection loss, lock timeouts and deadlocks surface as StoreUnavailableError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.error("Cannot connect to attendance store: %s", exc)
        raise StoreUnavailableError("Attendance store is unavailable, please retry") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception as exc:
        try:
            conn.rollback()
        except mysql.connector.Error as rollback_exc:
            logger.warning("Rollback failed: %s", rollback_exc)
        if is_transient(exc):
            logger.error("Transient attendance store failure: %s", exc)
            raise StoreUnavailableError("Attendance store is unavailable, please retry") from exc
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
