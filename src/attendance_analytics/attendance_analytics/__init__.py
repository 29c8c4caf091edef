"""Attendance Analytics package.

Working-hours analytics over daily login/logout sessions, organized by
feature modules (attendance, analytics, imports, seeding) with a thin Flask
controller layer over service/repository layers.
"""
from __future__ import annotations

from .analytics.aggregator import SessionAggregator
from .analytics.filters import MonthFilter, build_month_filter
from .analytics.service import AnalyticsService
from .attendance.model import AttendanceRecord
from .common.time_parser import ParsedTime, parse_clock_time
from .container import Container, build_container, build_services
from .imports.normalizer import ImportNormalizer
from .imports.service import ImportResult, ImportService

__all__ = [
    "AnalyticsService",
    "AttendanceRecord",
    "Container",
    "ImportNormalizer",
    "ImportResult",
    "ImportService",
    "MonthFilter",
    "ParsedTime",
    "SessionAggregator",
    "build_container",
    "build_month_filter",
    "build_services",
    "parse_clock_time",
]
