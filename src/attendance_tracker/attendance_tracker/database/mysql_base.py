from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.timeutils import format_hhmm, parse_hhmm
from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` on a fresh connection and commit on success.

    Connector errors are rolled back and re-raised as ``PersistenceError``.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(f"Database unavailable: {e}") from e

    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        raise PersistenceError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def mysql_time_to_hhmm(value: Any) -> Optional[str]:
    """TIME column value -> ``HH:MM``.

    mysql-connector hands TIME back as ``timedelta`` (C extension), ``time``
    or a ``'08:30:00'`` string depending on the build.
    """
    if value is None:
        return None

    if isinstance(value, time):
        return format_hhmm(value.hour * 60 + value.minute)

    if isinstance(value, timedelta):
        return format_hhmm(int(value.total_seconds()) // 60 % MINUTES_PER_DAY)

    if isinstance(value, str):
        minutes = parse_hhmm(":".join(value.strip().split(":")[:2]))
        if minutes is None:
            raise ValueError(f"Invalid time string: {value!r}")
        return format_hhmm(minutes)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
