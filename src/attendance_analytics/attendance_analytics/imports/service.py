from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import IO, Any, Iterable, Mapping, Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from ..core.constants import IMPORT_SUCCESS_MESSAGE
from .normalizer import ImportNormalizer
from .reader import read_tabular

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    message: str
    count: int

    def to_dict(self) -> dict:
        return {"message": self.message, "count": self.count}


class ImportService:
    """Replaces the whole record store with the valid rows of an upload."""

    # Shared by every instance: one replace at a time per process.
    _replace_lock = threading.Lock()

    def __init__(self, attendance: AttendanceRepository, *, normalizer: Optional[ImportNormalizer] = None):
        self._attendance = attendance
        self._normalizer = normalizer or ImportNormalizer()

    def import_rows(self, rows: Iterable[Mapping[Any, Any]]) -> ImportResult:
        normalized = self._normalizer.normalize_rows(rows)
        with self._replace_lock:
            count = self._attendance.replace_all(normalized.records)
        logger.info("imported %d attendance records (%d rows dropped)", count, normalized.dropped)
        return ImportResult(message=IMPORT_SUCCESS_MESSAGE, count=count)

    def import_file(self, stream: IO[bytes], filename: str) -> ImportResult:
        filename = require_non_empty(filename, "File name")
        rows = read_tabular(stream, filename)
        return self.import_rows(rows)
