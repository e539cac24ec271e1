from __future__ import annotations

import pytest
from mysql.connector import errors

from src.boarding_attendance.boarding_attendance.core.exceptions import StoreError
from src.boarding_attendance.boarding_attendance.database.mysql_base import db_cursor, fetchall


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self.executed: list[tuple[str, tuple]] = []
        self.closed = False
        self.lastrowid = 7

    def execute(self, sql: str, params: tuple = ()) -> None:
        if self._conn.execute_error:
            raise self._conn.execute_error
        self.executed.append((sql, params))

    def fetchall(self):
        return self._conn.rows

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, *, rows=None, execute_error=None, rollback_error=None, close_error=None):
        self.rows = rows if rows is not None else []
        self.execute_error = execute_error
        self.rollback_error = rollback_error
        self.close_error = close_error
        self.committed = False
        self.rolled_back = False
        self.closed = False
        self.cursors: list[FakeCursor] = []

    def cursor(self, dictionary: bool = True) -> FakeCursor:
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True
        if self.rollback_error:
            raise self.rollback_error

    def close(self) -> None:
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeConnectionFactory:
    def __init__(self, conn: FakeConnection | None = None, *, connect_error=None):
        self.conn = conn or FakeConnection()
        self._connect_error = connect_error

    def connect(self):
        if self._connect_error:
            raise self._connect_error
        return self.conn


def test_commits_and_closes_on_success():
    factory = FakeConnectionFactory()

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed is True
    assert factory.conn.rolled_back is False
    assert factory.conn.closed is True
    assert factory.conn.cursors[0].closed is True


def test_connector_error_becomes_store_error_after_rollback():
    factory = FakeConnectionFactory(FakeConnection(execute_error=errors.ProgrammingError("bad sql")))

    with pytest.raises(StoreError, match="bad sql"):
        with db_cursor(factory) as (_, cur):
            cur.execute("SELEC 1")

    assert factory.conn.committed is False
    assert factory.conn.rolled_back is True
    assert factory.conn.closed is True


def test_failed_rollback_on_dropped_connection_still_raises_store_error():
    conn = FakeConnection(
        execute_error=errors.OperationalError("Lost connection to MySQL server during query"),
        rollback_error=errors.OperationalError("MySQL Connection not available"),
        close_error=errors.OperationalError("MySQL Connection not available"),
    )

    with pytest.raises(StoreError, match="Lost connection"):
        with db_cursor(FakeConnectionFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")

    assert conn.rolled_back is True


def test_connect_failure_becomes_store_error():
    factory = FakeConnectionFactory(connect_error=errors.InterfaceError("Can't connect to MySQL server"))

    with pytest.raises(StoreError, match="Cannot connect"):
        with db_cursor(factory):
            pass


def test_non_driver_error_rolls_back_and_propagates_unchanged():
    factory = FakeConnectionFactory()

    with pytest.raises(KeyError):
        with db_cursor(factory):
            raise KeyError("adm_no")

    assert factory.conn.rolled_back is True
    assert factory.conn.committed is False
    assert factory.conn.closed is True


def test_fetchall_returns_list_for_empty_result():
    factory = FakeConnectionFactory(FakeConnection(rows=None))
    factory.conn.rows = None

    with db_cursor(factory) as (_, cur):
        assert fetchall(cur) == []
