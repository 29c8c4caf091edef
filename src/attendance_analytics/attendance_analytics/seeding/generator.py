from __future__ import annotations

import random
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_12h

DEFAULT_EMPLOYEES = (
    "John Doe",
    "Jane Smith",
    "Alice Brown",
    "Bob Johnson",
    "Mary Williams",
)


def dates_of_year(year: int) -> Iterator[date]:
    day = date(year, 1, 1)
    while day.year == year:
        yield day
        day += timedelta(days=1)


class SessionGenerator:
    """Synthetic sessions: one per employee per day of a year.

    Login falls between 10:00 and 11:59, logout 8 to 11h59 later on the
    same day.
    """

    def __init__(
        self,
        employees: Sequence[str] = DEFAULT_EMPLOYEES,
        *,
        rng: Optional[random.Random] = None,
        login_hours: tuple[int, int] = (10, 11),
        shift_hours: tuple[int, int] = (8, 11),
    ):
        self._employees = list(employees)
        self._rng = rng or random.Random()
        self._login_hours = login_hours
        self._shift_hours = shift_hours

    def session_for(self, employee: str, day: date) -> AttendanceRecord:
        login = datetime.combine(day, datetime.min.time()).replace(
            hour=self._rng.randint(*self._login_hours),
            minute=self._rng.randint(0, 59),
        )
        logout = login + timedelta(
            hours=self._rng.randint(*self._shift_hours),
            minutes=self._rng.randint(0, 59),
        )
        return AttendanceRecord(
            employee=employee,
            date=day,
            login_time=format_12h(login),
            logout_time=format_12h(logout),
        )

    def generate_year(self, year: int) -> list[AttendanceRecord]:
        return [self.session_for(employee, day) for employee in self._employees for day in dates_of_year(year)]
