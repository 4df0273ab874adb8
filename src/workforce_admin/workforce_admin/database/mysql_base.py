from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Open a connection + cursor, commit on success, roll back on error.

    Driver errors surface as StoreError so callers never see connector types.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StoreError(f"Data store unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise StoreError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return normalize_row(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [normalize_row(r) for r in rows or []]


def to_wall_clock(value: time | timedelta) -> str:
    """mysql-connector hands TIME columns back as timedelta."""

    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        value = time(seconds // 3600, seconds % 3600 // 60, seconds % 60)
    return value.strftime("%H:%M:%S")


def normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Convert driver values to the plain shapes the gateway hands out.

    DATE -> 'YYYY-MM-DD', TIME -> 'HH:MM:SS', DECIMAL -> float.
    DATETIME values are kept as datetime.
    """

    out: Dict[str, Any] = {}
    for key, value in row.items():
        if isinstance(value, datetime):
            out[key] = value
        elif isinstance(value, date):
            out[key] = value.strftime("%Y-%m-%d")
        elif isinstance(value, (time, timedelta)):
            out[key] = to_wall_clock(value)
        elif isinstance(value, Decimal):
            out[key] = float(value)
        else:
            out[key] = value
    return out
