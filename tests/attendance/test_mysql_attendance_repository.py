from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from src.attendance_analytics.attendance_analytics.analytics.filters import MonthFilter
from src.attendance_analytics.attendance_analytics.attendance.model import AttendanceRecord
from src.attendance_analytics.attendance_analytics.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.attendance_analytics.attendance_analytics.core.exceptions import StoreError


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.rowcount = 0

    def execute(self, sql, params=None):
        self._conn.log.append(("execute", " ".join(sql.split()), params))
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise mysql.connector.Error("boom")
        if sql.strip().startswith("DELETE"):
            self.rowcount = 3

    def executemany(self, sql, seq):
        self._conn.log.append(("executemany", " ".join(sql.split()), list(seq)))
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise mysql.connector.Error("boom")

    def fetchall(self):
        return self._conn.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows=None, fail_on=None):
        self.rows = rows or []
        self.fail_on = fail_on
        self.log = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn=None, error=None):
        self.conn = conn
        self.error = error
        self.connects = 0

    def connect(self):
        self.connects += 1
        if self.error:
            raise self.error
        return self.conn


RECORDS = [
    AttendanceRecord(employee="John", date=date(2025, 1, 5), login_time="9:00:00 AM", logout_time="6:00:00 PM"),
    AttendanceRecord(employee="Jane", date=date(2025, 1, 6), login_time="08:30:00", logout_time="17:00:00"),
]


def test_find_all_maps_rows_and_sorts_by_date_desc():
    conn = FakeConnection(
        rows=[
            {
                "session_id": 7,
                "employee": "John",
                "work_date": datetime(2025, 1, 5, 0, 0),
                "login_time": "9:00:00 AM",
                "logout_time": "6:00:00 PM",
            }
        ]
    )
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    records = repo.find_all()

    assert records == [
        AttendanceRecord(
            record_id=7,
            employee="John",
            date=date(2025, 1, 5),
            login_time="9:00:00 AM",
            logout_time="6:00:00 PM",
        )
    ]
    assert "ORDER BY work_date DESC" in conn.log[0][1]
    assert conn.closed


def test_find_filtered_pushes_predicate_into_sql():
    conn = FakeConnection()
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    repo.find_filtered(MonthFilter(year=2025, months=frozenset({1, 2})))

    _, sql, params = conn.log[0]
    assert "WHERE YEAR(work_date) = %s AND MONTH(work_date) IN (%s, %s)" in sql
    assert params == (2025, 1, 2)


def test_replace_all_runs_in_one_transaction():
    conn = FakeConnection()
    factory = FakeConnFactory(conn)
    repo = MySQLAttendanceRepository(factory)

    count = repo.replace_all(RECORDS)

    assert count == 2
    assert factory.connects == 1
    assert conn.commits == 1
    assert [entry[0] for entry in conn.log] == ["execute", "executemany"]
    assert conn.log[0][1] == "DELETE FROM user_sessions"
    assert conn.log[1][2] == [
        ("John", date(2025, 1, 5), "9:00:00 AM", "6:00:00 PM"),
        ("Jane", date(2025, 1, 6), "08:30:00", "17:00:00"),
    ]


def test_replace_all_rolls_back_when_insert_fails():
    conn = FakeConnection(fail_on="INSERT")
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    with pytest.raises(StoreError, match="boom"):
        repo.replace_all(RECORDS)

    assert conn.rollbacks == 1
    assert conn.commits == 0
    assert conn.closed


def test_insert_many_and_delete_all():
    conn = FakeConnection()
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    assert repo.insert_many([]) == 0
    assert conn.log == []
    assert repo.insert_many(RECORDS) == 2
    assert repo.delete_all() == 3


def test_connection_failure_becomes_store_error():
    repo = MySQLAttendanceRepository(FakeConnFactory(error=mysql.connector.Error("boom")))

    with pytest.raises(StoreError, match="boom"):
        repo.find_all()
