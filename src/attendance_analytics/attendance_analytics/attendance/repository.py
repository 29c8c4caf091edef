from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..analytics.filters import MonthFilter
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_all(self) -> Sequence[AttendanceRecord]:
        """All records, newest date first."""

        raise NotImplementedError

    def find_filtered(self, month_filter: MonthFilter) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError

    def insert_many(self, records: Iterable[AttendanceRecord]) -> int:
        raise NotImplementedError

    def replace_all(self, records: Iterable[AttendanceRecord]) -> int:
        """Delete everything and insert `records` as one atomic operation."""

        raise NotImplementedError
