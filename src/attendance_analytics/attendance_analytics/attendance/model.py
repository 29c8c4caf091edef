from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's login/logout pair for one day."""

    employee: Optional[str]
    date: Optional[date]
    login_time: Optional[str]
    logout_time: Optional[str]
    record_id: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        texts = (self.employee, self.login_time, self.logout_time)
        return self.date is not None and all((t or "").strip() for t in texts)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee": self.employee,
            "date": self.date.isoformat() if self.date else None,
            "loginTime": self.login_time,
            "logoutTime": self.logout_time,
        }


@dataclass(frozen=True)
class WorkSession:
    """Read-model derived from a complete, parseable AttendanceRecord."""

    employee: str
    year: int
    month: int
    login_ms: int
    logout_ms: int

    @property
    def worked_ms(self) -> int:
        return self.logout_ms - self.login_ms
