from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection


def _rollback_quietly(conn) -> None:
    # A dropped connection cannot roll back.
    try:
        conn.rollback()
    except mysql.connector.Error:
        pass


def _close_quietly(conn) -> None:
    try:
        conn.close()
    except mysql.connector.Error:
        pass


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Open a connection + cursor, commit on success, roll back on error.

    Connector errors surface as ``StoreError`` so services never depend on
    the driver's exception types.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StoreError(f"Cannot connect to database: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise StoreError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        _close_quietly(conn)


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
