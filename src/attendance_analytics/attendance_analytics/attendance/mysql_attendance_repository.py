from __future__ import annotations

from typing import Iterable, Sequence

from ..analytics.filters import MonthFilter
from ..common.datetime_utils import as_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT session_id, employee, work_date, login_time, logout_time
    FROM user_sessions
"""

_INSERT = """
    INSERT INTO user_sessions(employee, work_date, login_time, logout_time)
    VALUES(%s,%s,%s,%s)
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["session_id"]),
        employee=r["employee"],
        date=as_date(r["work_date"]),
        login_time=r.get("login_time"),
        logout_time=r.get("logout_time"),
    )


def _to_params(records: Iterable[AttendanceRecord]) -> list[tuple]:
    return [(r.employee, r.date, r.login_time, r.logout_time) for r in records]


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY work_date DESC, session_id ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def find_filtered(self, month_filter: MonthFilter) -> Sequence[AttendanceRecord]:
        where, params = month_filter.sql_predicate("work_date")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY work_date DESC, session_id ASC", params)
            return [_to_record(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_sessions")
            return int(cur.rowcount)

    def insert_many(self, records: Iterable[AttendanceRecord]) -> int:
        params = _to_params(records)
        if not params:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_INSERT, params)
            return len(params)

    def replace_all(self, records: Iterable[AttendanceRecord]) -> int:
        # One connection, one transaction: readers never see the empty table.
        params = _to_params(records)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_sessions")
            if params:
                cur.executemany(_INSERT, params)
            return len(params)
