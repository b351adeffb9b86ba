from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from ..common.datetime_utils import to_minutes
from ..core.constants import MINUTES_PER_DAY
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on any error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def in_clause(values: Sequence[Any]) -> str:
    """Placeholder list for ``IN (...)`` with one %s per value."""
    if not values:
        raise ValueError("IN clause needs at least one value")
    return ", ".join(["%s"] * len(values))


def as_decimal(value: Any) -> Optional[Decimal]:
    """DECIMAL/FLOAT column -> Decimal, keeping NULL as None."""
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME column -> ``time`` at minute precision.

    mysql-connector returns TIME as a ``timedelta`` since midnight. Shift and
    attendance times are minute-grained, so seconds are dropped.
    """
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) // 60 % MINUTES_PER_DAY
    else:
        minutes = to_minutes(value)
    return time(hour=minutes // 60, minute=minutes % 60)
