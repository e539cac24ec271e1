from __future__ import annotations

import io
from dataclasses import dataclass, field
from datetime import date, datetime

import pytest
from openpyxl import load_workbook

from src.boarding_attendance.boarding_attendance.container import build_services
from src.boarding_attendance.boarding_attendance.core.exceptions import StoreError
from src.boarding_attendance.boarding_attendance.main import create_app
from src.boarding_attendance.boarding_attendance.roster.model import RosterEntry


@dataclass
class InMemoryRoster:
    entries: list[RosterEntry] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)

    def find_by_adm_no(self, adm_no: str):
        self.queries.append(adm_no)
        return [e for e in self.entries if e.adm_no == adm_no]


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[dict] = []
        self.fail = False

    def insert_event(self, *, adm_no: str, name: str, class_sec: str, timestamp: datetime) -> int:
        if self.fail:
            raise StoreError("insert rejected")
        self.rows.append(
            {"id": len(self.rows) + 1, "adm_no": adm_no, "name": name, "class_sec": class_sec, "timestamp": timestamp}
        )
        return len(self.rows)

    def list_between(self, *, start: datetime, end: datetime):
        return [r for r in self.rows if start <= r["timestamp"] <= end]


@pytest.fixture()
def repos():
    return InMemoryRoster([RosterEntry(adm_no="12345678", name="Jane", class_sec="5A")]), InMemoryAttendance()


@pytest.fixture()
def client(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    roster, attendance = repos
    app = create_app(container=build_services(roster_repo=roster, attendance_repo=attendance))
    with app.test_client() as c:
        yield c


def _scan(client, digits: str):
    return [client.post("/api/scanner/key", json={"key": k}).get_json() for k in digits]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok"}


def test_index_renders_form_with_today(client):
    res = client.get("/")
    html = res.get_data(as_text=True)
    today = date.today().strftime("%Y-%m-%d")

    assert res.status_code == 200
    assert "Day Boarding Attendance" in html
    assert "Scan barcode here" in html
    assert "Download Attendance" in html
    assert f'min="{today}"' in html


def test_partial_scan_only_accumulates(client, repos):
    roster, _ = repos

    states = _scan(client, "1234")
    res = client.post("/api/scanner/key", json={"key": "Backspace"}).get_json()

    assert states[-1] == {"buffer": "1234", "prevent_default": True, "submitted": False}
    assert res["buffer"] == "123"
    assert roster.queries == []


def test_full_scan_records_event_and_clears_buffer(client, repos):
    roster, attendance = repos

    states = _scan(client, "12345678")

    assert roster.queries == ["12345678"]
    assert states[-1] == {"buffer": "", "prevent_default": True, "submitted": True}
    assert len(attendance.rows) == 1
    assert attendance.rows[0]["name"] == "Jane"


def test_unknown_scan_gives_no_error(client, repos):
    _, attendance = repos

    states = _scan(client, "99999999")

    assert states[-1]["buffer"] == ""
    assert "error" not in states[-1]
    assert attendance.rows == []


def test_store_failure_is_invisible_to_page(client, repos):
    _, attendance = repos
    attendance.fail = True

    res = None
    for k in "12345678":
        res = client.post("/api/scanner/key", json={"key": k})

    assert res.status_code == 200
    assert res.get_json()["buffer"] == ""


def test_sessions_do_not_share_buffers(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    roster, attendance = repos
    app = create_app(container=build_services(roster_repo=roster, attendance_repo=attendance))

    with app.test_client() as a, app.test_client() as b:
        _scan(a, "1234")
        state = b.post("/api/scanner/key", json={"key": "9"}).get_json()

    assert state["buffer"] == "9"


def test_input_endpoint_replaces_buffer(client):
    res = client.post("/api/scanner/input", json={"value": "42"}).get_json()

    assert res["buffer"] == "42"
    assert _scan(client, "1")[-1]["buffer"] == "421"


def test_end_date_cannot_precede_start(client):
    res = client.post("/api/dates", json={"start": "2026-03-10"}).get_json()
    assert res["min_end"] == "2026-03-10"

    res = client.post("/api/dates", json={"end": "2026-03-09"}).get_json()
    assert res["accepted"] is False

    res = client.post("/api/dates", json={"end": "2026-03-11"}).get_json()
    assert res == {"start": "2026-03-10", "end": "2026-03-11", "min_end": "2026-03-10", "accepted": True}


def test_malformed_date_is_rejected(client):
    res = client.post("/api/dates", json={"start": "10/03/2026"})

    assert res.status_code == 400
    assert "YYYY-MM-DD" in res.get_json()["error"]


def test_export_with_no_events_returns_no_content(client):
    res = client.get("/attendance/export?start=2020-01-01&end=2020-01-02")

    assert res.status_code == 204
    assert res.data == b""


def test_export_after_scan_downloads_workbook(client):
    _scan(client, "12345678")
    _scan(client, "12345678")

    # No query parameters: the session's selected dates (today..today) apply.
    res = client.get("/attendance/export")

    assert res.status_code == 200
    assert "attendance_new.xlsx" in res.headers["Content-Disposition"]
    rows = list(load_workbook(io.BytesIO(res.data))["Attendance"].iter_rows(values_only=True))
    assert len(rows) == 3
    assert rows[1][1:4] == ("12345678", "Jane", "5A")


def test_anonymous_requests_do_not_accumulate_sessions(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    roster, attendance = repos
    container = build_services(roster_repo=roster, attendance_repo=attendance)
    app = create_app(container=container)

    for _ in range(50):
        with app.test_client() as c:
            assert c.get("/attendance/export").status_code == 204
            assert c.get("/health").status_code == 200

    assert len(container.ui_sessions) == 0


def test_session_registry_is_bounded(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    roster, attendance = repos
    container = build_services(roster_repo=roster, attendance_repo=attendance, ui_session_max=5)
    app = create_app(container=container)

    for _ in range(20):
        with app.test_client() as c:
            c.get("/")

    assert len(container.ui_sessions) == 5


@pytest.mark.parametrize("body", ["[1, 2]", '"8"', "42", "null", "{not json"])
def test_non_object_json_bodies_are_treated_as_empty(client, body):
    for url in ("/api/scanner/key", "/api/scanner/input", "/api/dates"):
        res = client.post(url, data=body, content_type="application/json")
        assert res.status_code == 200, url

    assert client.post("/api/scanner/key", json={"key": "3"}).get_json()["buffer"] == "3"


def test_page_script_serializes_date_picks_before_export(client):
    res = client.get("/static/scanner.js")
    script = res.get_data(as_text=True)
    res.close()

    assert res.status_code == 200
    assert "enqueue(button.dataset.datesUrl" in script
    assert "await queue;" in script
