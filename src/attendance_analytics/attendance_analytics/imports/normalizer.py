from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_time_of_day
from ..core.constants import IMPORT_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedImport:
    records: list[AttendanceRecord]
    dropped: int


def _is_missing(value: Any) -> bool:
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _clean_text(value: Any) -> str:
    if _is_missing(value):
        return ""
    if isinstance(value, datetime):
        return format_time_of_day(value.time())
    if isinstance(value, time):
        return format_time_of_day(value)
    return str(value).strip()


def _clean_date(value: Any) -> Optional[date]:
    if _is_missing(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return None
    parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


class ImportNormalizer:
    """Maps spreadsheet rows (`Name`, `Log In`, `Log Out`, `date`) to records.

    Header keys are compared after stripping whitespace. Rows with any of the
    four fields missing, or with a date that does not parse, are dropped.
    """

    def __init__(self, columns: Optional[Mapping[str, str]] = None):
        self._columns = dict(columns or IMPORT_COLUMNS)

    def normalize_row(self, row: Mapping[Any, Any]) -> Optional[AttendanceRecord]:
        fields: dict[str, Any] = {}
        for key, value in row.items():
            field = self._columns.get(str(key).strip())
            if field:
                fields[field] = value

        employee = _clean_text(fields.get("employee"))
        login_time = _clean_text(fields.get("login_time"))
        logout_time = _clean_text(fields.get("logout_time"))
        work_date = _clean_date(fields.get("date"))

        if not (employee and login_time and logout_time and work_date):
            return None
        return AttendanceRecord(employee=employee, date=work_date, login_time=login_time, logout_time=logout_time)

    def normalize_rows(self, rows: Iterable[Mapping[Any, Any]]) -> NormalizedImport:
        records: list[AttendanceRecord] = []
        dropped = 0
        for index, row in enumerate(rows):
            record = self.normalize_row(row)
            if record is None:
                dropped += 1
                logger.debug("dropping malformed import row %d: %r", index, dict(row))
                continue
            records.append(record)
        return NormalizedImport(records=records, dropped=dropped)
