"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the analytics live in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_analytics.attendance_analytics.analytics.filters import build_month_filter
from src.attendance_analytics.attendance_analytics.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    q1 = build_month_filter(2025, "Jan,Feb,Mar")
    print(container.analytics_service.dashboard_stats(q1))
    print(container.analytics_service.top_working_hours(q1))


if __name__ == "__main__":
    main()
