from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, WorkSession
from ..common.time_parser import format_clock, parse_clock_time
from ..core.constants import DEFAULT_RANKING_LIMIT, MILLIS_PER_HOUR, OVERTIME_THRESHOLD_HOURS
from .filters import MonthFilter

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 2) -> float:
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_session(record: AttendanceRecord) -> Optional[WorkSession]:
    """Turn a record into a WorkSession, or None when it cannot contribute."""

    if not record.is_complete:
        return None

    login = parse_clock_time(record.login_time)
    logout = parse_clock_time(record.logout_time)
    if not (login.ok and logout.ok):
        logger.warning(
            "skipping record for %s on %s: %s",
            record.employee,
            record.date,
            login.error or logout.error,
        )
        return None

    return WorkSession(
        employee=record.employee,
        year=record.date.year,
        month=record.date.month,
        login_ms=login.millis,
        logout_ms=logout.millis,
    )


@dataclass
class _HoursAccumulator:
    total: float = 0.0
    count: int = 0
    max_hours: float = float("-inf")
    min_hours: float = float("inf")

    def add(self, hours: float) -> None:
        self.total += hours
        self.count += 1
        self.max_hours = max(self.max_hours, hours)
        self.min_hours = min(self.min_hours, hours)


class SessionAggregator:
    """Pure computations over attendance records.

    Every view drops incomplete records, records whose times do not parse,
    and records outside `month_filter` before computing anything.
    """

    def __init__(
        self,
        *,
        overtime_threshold_hours: float = OVERTIME_THRESHOLD_HOURS,
        ranking_limit: int = DEFAULT_RANKING_LIMIT,
    ):
        self._threshold = float(overtime_threshold_hours)
        self._limit = int(ranking_limit)

    def sessions(
        self,
        records: Iterable[AttendanceRecord],
        month_filter: Optional[MonthFilter] = None,
    ) -> list[WorkSession]:
        out = []
        for record in records:
            s = to_session(record)
            if s is None:
                continue
            if month_filter is not None and not month_filter.matches(s.year, s.month):
                continue
            out.append(s)
        return out

    def worked_hours(self, session: WorkSession) -> float:
        return session.worked_ms / MILLIS_PER_HOUR

    def overtime_hours(self, session: WorkSession) -> float:
        return max(self.worked_hours(session) - self._threshold, 0.0)

    # ----- views -----

    def total_employees(self, records, month_filter: Optional[MonthFilter] = None) -> dict:
        sessions = self.sessions(records, month_filter)
        return {"totalEmployees": len({s.employee for s in sessions})}

    def dashboard_stats(self, records, month_filter: Optional[MonthFilter] = None) -> dict:
        sessions = self.sessions(records, month_filter)
        if not sessions:
            return {
                "totalEmployees": 0,
                "avgLoginTime": format_clock(0),
                "avgLogoutTime": format_clock(0),
                "avgWorkHours": "0.0",
            }

        n = len(sessions)
        avg_login = sum(s.login_ms for s in sessions) / n
        avg_logout = sum(s.logout_ms for s in sessions) / n
        avg_hours = sum(self.worked_hours(s) for s in sessions) / n

        return {
            "totalEmployees": len({s.employee for s in sessions}),
            "avgLoginTime": format_clock(avg_login),
            "avgLogoutTime": format_clock(avg_logout),
            "avgWorkHours": f"{round_half_up(avg_hours, 1):.1f}",
        }

    def employee_monthly_hours(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        totals: dict[tuple[str, int, int], float] = {}
        for s in self.sessions(records, month_filter):
            key = (s.employee, s.year, s.month)
            totals[key] = totals.get(key, 0.0) + self.worked_hours(s)

        return [
            {
                "employee": employee,
                "year": year,
                "month": month,
                "totalWorkHours": round_half_up(hours, 2),
            }
            for (employee, year, month), hours in sorted(totals.items())
        ]

    def _overtime_by_month(self, records, month_filter: Optional[MonthFilter]) -> dict[int, list[float]]:
        # Grouped by month number only; the same month of different years is merged.
        by_month: dict[int, list[float]] = {}
        for s in self.sessions(records, month_filter):
            by_month.setdefault(s.month, []).append(self.overtime_hours(s))
        return by_month

    def monthly_overtime(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        by_month = self._overtime_by_month(records, month_filter)
        return [
            {"month": month, "totalOvertime": int(round_half_up(sum(values), 0))}
            for month, values in sorted(by_month.items())
        ]

    def avg_break_per_month(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        by_month = self._overtime_by_month(records, month_filter)
        return [
            {"month": month, "avgBreakHours": round_half_up(sum(values) / len(values), 2)}
            for month, values in sorted(by_month.items())
        ]

    def total_break_per_month(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        by_month = self._overtime_by_month(records, month_filter)
        return [
            {"month": month, "totalBreakHours": round_half_up(sum(values), 2)}
            for month, values in sorted(by_month.items())
        ]

    def _hours_by_employee(self, records, month_filter: Optional[MonthFilter]) -> dict[str, _HoursAccumulator]:
        # dict keeps first-seen order, which sorted() preserves for equal totals.
        # Rankings compare totals after rounding to 2 decimals.
        by_employee: dict[str, _HoursAccumulator] = {}
        for s in self.sessions(records, month_filter):
            by_employee.setdefault(s.employee, _HoursAccumulator()).add(self.worked_hours(s))
        return by_employee

    def _ranked(self, records, month_filter: Optional[MonthFilter], *, descending: bool) -> list[dict]:
        by_employee = self._hours_by_employee(records, month_filter)
        totals = [(employee, round_half_up(acc.total, 2)) for employee, acc in by_employee.items()]
        ranked = sorted(totals, key=lambda kv: kv[1], reverse=descending)
        return [{"employee": employee, "totalHours": total} for employee, total in ranked[: self._limit]]

    def top_working_hours(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._ranked(records, month_filter, descending=True)

    def bottom_working_hours(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._ranked(records, month_filter, descending=False)

    def employee_summary(self, records, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        by_employee = self._hours_by_employee(records, month_filter)
        ranked = sorted(by_employee.items(), key=lambda kv: round_half_up(kv[1].total, 2), reverse=True)
        return [
            {
                "employee": employee,
                "totalHours": round_half_up(acc.total, 2),
                "avgHours": round_half_up(acc.total / acc.count, 2),
                "maxHours": round_half_up(acc.max_hours, 2),
                "minHours": round_half_up(acc.min_hours, 2),
                "daysWorked": acc.count,
            }
            for employee, acc in ranked
        ]

    def attendance_years(self, records) -> list[int]:
        return sorted({s.year for s in self.sessions(records)})
