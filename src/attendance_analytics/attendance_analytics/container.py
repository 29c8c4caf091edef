from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.aggregator import SessionAggregator
from .analytics.service import AnalyticsService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .imports.service import ImportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    analytics_service: AnalyticsService
    import_service: ImportService


def build_services(
    attendance_repo: AttendanceRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    push_down: bool = False,
) -> Container:
    analytics_service = AnalyticsService(attendance_repo, aggregator=SessionAggregator(), push_down=push_down)
    import_service = ImportService(attendance_repo)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        analytics_service=analytics_service,
        import_service=import_service,
    )


def build_container(*, db_config: dict, push_down: bool = False) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return build_services(MySQLAttendanceRepository(conn), conn=conn, push_down=push_down)
