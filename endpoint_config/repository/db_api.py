"""Single round-trip helpers over a caller-owned sqlite3 connection.

None of these commit; the caller owns the transaction. sqlite3 errors
propagate unchanged.
"""
from __future__ import annotations

from sqlite3 import Connection, Row
from typing import Any, List, Optional, Sequence


def db_all(conn: Connection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    return conn.execute(sql, params).fetchall()


def db_get(conn: Connection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    return conn.execute(sql, params).fetchone()


def db_insert(conn: Connection, sql: str, params: Sequence[Any] = ()) -> int:
    return conn.execute(sql, params).lastrowid


def db_update(conn: Connection, sql: str, params: Sequence[Any] = ()) -> int:
    return conn.execute(sql, params).rowcount


def db_remove(conn: Connection, sql: str, params: Sequence[Any] = ()) -> int:
    return conn.execute(sql, params).rowcount
