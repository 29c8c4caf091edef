from __future__ import annotations

import io
from datetime import date

import pytest

from src.attendance_analytics.attendance_analytics.attendance.model import AttendanceRecord
from src.attendance_analytics.attendance_analytics.container import build_services
from src.attendance_analytics.attendance_analytics.core.exceptions import StoreError
from src.attendance_analytics.attendance_analytics.main import create_app


class InMemoryAttendance:
    def __init__(self, records=None):
        self.records = list(records or [])

    def find_all(self):
        return sorted(self.records, key=lambda r: r.date, reverse=True)

    def find_filtered(self, month_filter):
        return [r for r in self.find_all() if month_filter.matches_date(r.date)]

    def replace_all(self, records):
        self.records = list(records)
        return len(self.records)


class BrokenAttendance(InMemoryAttendance):
    def find_all(self):
        raise StoreError("connection refused")

    def replace_all(self, records):
        raise StoreError("write failed")


def make_client(repo, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_services(repo))
    return app.test_client()


@pytest.fixture
def repo():
    return InMemoryAttendance(
        [
            AttendanceRecord(employee="John", date=date(2025, 1, 5), login_time="9:00:00 AM", logout_time="6:00:00 PM"),
            AttendanceRecord(employee="Jane", date=date(2025, 3, 2), login_time="9:00:00 AM", logout_time="7:00:00 PM"),
        ]
    )


@pytest.fixture
def client(repo, monkeypatch):
    return make_client(repo, monkeypatch)


def test_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"running" in resp.data


def test_dashboard_stats(client):
    resp = client.get("/dashboard-stats?months=Jan")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "totalEmployees": 1,
        "avgLoginTime": "9:00",
        "avgLogoutTime": "18:00",
        "avgWorkHours": "9.0",
    }


def test_months_filter_excludes_march_but_not_its_year(client):
    assert client.get("/monthly-overtime?months=Jan,Feb").get_json() == [{"month": 1, "totalOvertime": 1}]
    assert client.get("/monthly-overtime").get_json() == [
        {"month": 1, "totalOvertime": 1},
        {"month": 3, "totalOvertime": 2},
    ]
    assert client.get("/attendance-years?months=Jan").get_json() == [2025]


def test_bad_query_params_fall_back_to_no_filter(client):
    assert client.get("/total-employees?year=abc&months=Foo").get_json() == {"totalEmployees": 2}
    assert client.get("/total-employees?year=2024").get_json() == {"totalEmployees": 0}


@pytest.mark.parametrize(
    "path",
    [
        "/employee-monthly-hours",
        "/avg-break-per-month",
        "/total-break-per-month",
        "/top-working-hours",
        "/bottom-working-hours",
        "/employee-summary",
        "/userSessions",
    ],
)
def test_list_endpoints_return_json_arrays(client, path):
    resp = client.get(path)
    assert resp.status_code == 200
    assert isinstance(resp.get_json(), list)


def test_empty_store_returns_zero_values(monkeypatch):
    client = make_client(InMemoryAttendance(), monkeypatch)

    assert client.get("/total-employees").get_json() == {"totalEmployees": 0}
    assert client.get("/employee-summary").get_json() == []
    assert client.get("/dashboard-stats").get_json()["avgLoginTime"] == "0:00"


def test_upload_replaces_sessions(client, repo):
    csv = b"Name,Log In,Log Out,date\nBob,08:00:00,16:00:00,2026-04-01\nBad,,16:00:00,2026-04-01\n"

    resp = client.post(
        "/upload-excel",
        data={"file": (io.BytesIO(csv), "sessions.csv")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Data imported successfully", "count": 1}
    assert [r.employee for r in repo.records] == ["Bob"]
    assert client.get("/attendance-years").get_json() == [2026]


def test_upload_without_file_is_400(client):
    resp = client.post("/upload-excel", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file uploaded"}


def test_store_failure_is_500(monkeypatch):
    client = make_client(BrokenAttendance(), monkeypatch)

    resp = client.get("/employee-summary")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "connection refused"}

    resp = client.post(
        "/upload-excel",
        data={"file": (io.BytesIO(b"Name,Log In,Log Out,date\nA,09:00:00,17:00:00,2025-01-01\n"), "a.csv")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "write failed"}
