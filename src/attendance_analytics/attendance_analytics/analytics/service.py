from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from .aggregator import SessionAggregator
from .filters import MonthFilter


class AnalyticsService:
    """Loads records from the store and hands them to the aggregator.

    With `push_down=True` the month filter is evaluated by the store
    (`find_filtered`); otherwise all records are loaded and filtered in
    memory. Both paths give the same results.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[SessionAggregator] = None,
        push_down: bool = False,
    ):
        self._attendance = attendance
        self._aggregator = aggregator or SessionAggregator()
        self._push_down = bool(push_down)

    def _load(self, month_filter: Optional[MonthFilter]) -> Sequence[AttendanceRecord]:
        if month_filter is not None and self._push_down:
            return self._attendance.find_filtered(month_filter)
        return self._attendance.find_all()

    def list_sessions(self) -> list[dict]:
        return [r.to_dict() for r in self._attendance.find_all()]

    def total_employees(self, month_filter: Optional[MonthFilter] = None) -> dict:
        return self._aggregator.total_employees(self._load(month_filter), month_filter)

    def dashboard_stats(self, month_filter: Optional[MonthFilter] = None) -> dict:
        return self._aggregator.dashboard_stats(self._load(month_filter), month_filter)

    def employee_monthly_hours(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.employee_monthly_hours(self._load(month_filter), month_filter)

    def monthly_overtime(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.monthly_overtime(self._load(month_filter), month_filter)

    def avg_break_per_month(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.avg_break_per_month(self._load(month_filter), month_filter)

    def total_break_per_month(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.total_break_per_month(self._load(month_filter), month_filter)

    def top_working_hours(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.top_working_hours(self._load(month_filter), month_filter)

    def bottom_working_hours(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.bottom_working_hours(self._load(month_filter), month_filter)

    def employee_summary(self, month_filter: Optional[MonthFilter] = None) -> list[dict]:
        return self._aggregator.employee_summary(self._load(month_filter), month_filter)

    def attendance_years(self) -> list[int]:
        return self._aggregator.attendance_years(self._attendance.find_all())
