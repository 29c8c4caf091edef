from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import StoreError
from .filters import build_month_filter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    analytics = container.analytics_service

    def json_view(view):
        """Serialize the view result; store failures become HTTP 500."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return jsonify(view(*args, **kwargs))
            except StoreError as e:
                logger.error("%s failed: %s", request.path, e)
                return jsonify({"error": str(e)}), 500

        return wrapper

    def _month_filter():
        # Bad values are ignored rather than rejected.
        return build_month_filter(request.args.get("year"), request.args.get("months"))

    @app.route("/", endpoint="health")
    def health():
        return "Attendance API is running"

    @app.route("/userSessions", endpoint="user_sessions")
    @json_view
    def user_sessions():
        return analytics.list_sessions()

    @app.route("/total-employees", endpoint="total_employees")
    @json_view
    def total_employees():
        return analytics.total_employees(_month_filter())

    @app.route("/dashboard-stats", endpoint="dashboard_stats")
    @json_view
    def dashboard_stats():
        return analytics.dashboard_stats(_month_filter())

    @app.route("/employee-monthly-hours", endpoint="employee_monthly_hours")
    @json_view
    def employee_monthly_hours():
        return analytics.employee_monthly_hours(_month_filter())

    @app.route("/monthly-overtime", endpoint="monthly_overtime")
    @json_view
    def monthly_overtime():
        return analytics.monthly_overtime(_month_filter())

    @app.route("/avg-break-per-month", endpoint="avg_break_per_month")
    @json_view
    def avg_break_per_month():
        return analytics.avg_break_per_month(_month_filter())

    @app.route("/total-break-per-month", endpoint="total_break_per_month")
    @json_view
    def total_break_per_month():
        return analytics.total_break_per_month(_month_filter())

    @app.route("/top-working-hours", endpoint="top_working_hours")
    @json_view
    def top_working_hours():
        return analytics.top_working_hours(_month_filter())

    @app.route("/bottom-working-hours", endpoint="bottom_working_hours")
    @json_view
    def bottom_working_hours():
        return analytics.bottom_working_hours(_month_filter())

    @app.route("/employee-summary", endpoint="employee_summary")
    @json_view
    def employee_summary():
        return analytics.employee_summary(_month_filter())

    @app.route("/attendance-years", endpoint="attendance_years")
    @json_view
    def attendance_years():
        return analytics.attendance_years()
