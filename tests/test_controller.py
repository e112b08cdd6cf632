from __future__ import annotations

import json
from datetime import date, datetime

import pytest
from flask import Flask

from karma_manager.attendance.controller import register
from karma_manager.container import build_container
from karma_manager.main import create_app
from karma_manager.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def app():
    app = create_app("config.testing")
    container = app.extensions["karma_manager"]
    container.store.set("staff_c1", json.dumps([{"id": "E-1", "name": "Aarav"}]))
    container.store.set("students_c1", json.dumps([{"id": "S-1", "name": "Anaya"}]))
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_punch_in_then_out(client):
    r1 = client.post("/api/clients/c1/staff/punch", json={"person_id": "E-1"})
    r2 = client.post("/api/clients/c1/staff/punch", json={"person_id": "E-1"})

    assert r1.status_code == 200
    assert r1.get_json()["direction"] == "in"
    assert r1.get_json()["message"] == "Welcome, Aarav!"
    assert r2.get_json()["direction"] == "out"
    assert r2.get_json()["action"] == "Clock Out"
    assert r2.get_json()["record"]["outTime"] is not None


def test_punch_requires_person_id(client):
    r = client.post("/api/clients/c1/staff/punch", json={})

    assert r.status_code == 400
    assert r.get_json()["success"] is False


def test_unknown_person_is_404(client):
    r = client.post("/api/clients/c1/staff/punch", json={"person_id": "ghost"})

    assert r.status_code == 404
    assert "Unknown Staff" in r.get_json()["message"]


def test_unknown_population_is_404(client):
    assert client.post("/api/clients/c1/teachers/punch", json={"person_id": "E-1"}).status_code == 404


def test_kiosk_scan_punches_badge_owner(client):
    r = client.post("/api/clients/c1/kiosk/scan", json={"qr_code": "karma:c1:students:S-1"})

    assert r.status_code == 200
    assert r.get_json()["direction"] == "in"


def test_kiosk_scan_rejects_other_tenant_and_garbage(client):
    assert client.post("/api/clients/c1/kiosk/scan", json={"qr_code": "karma:c2:staff:E-1"}).status_code == 400
    assert client.post("/api/clients/c1/kiosk/scan", json={"qr_code": "hello"}).status_code == 400


def test_badge_image(client):
    r = client.get("/api/clients/c1/staff/E-1/badge.png")

    assert r.status_code == 200
    assert r.mimetype == "image/png"
    assert r.data.startswith(b"\x89PNG")
    assert client.get("/api/clients/c1/staff/ghost/badge.png").status_code == 404


def test_day_log(client):
    client.post("/api/clients/c1/staff/punch", json={"person_id": "E-1"})

    rows = client.get("/api/clients/c1/staff/attendance").get_json()["rows"]

    assert [(r["person_id"], r["name"], r["status"]) for r in rows] == [("E-1", "Aarav", "In")]
    assert client.get("/api/clients/c1/staff/attendance?date=01-05-2024").status_code == 400


def test_report_and_csv(client):
    client.post("/api/clients/c1/staff/punch", json={"person_id": "E-1"})
    today = date.today().strftime("%Y-%m-%d")

    r = client.get(f"/api/clients/c1/staff/report?start={today}&end={today}")
    assert r.status_code == 200
    assert r.get_json()["summary"][0]["name"] == "Aarav"

    csv_resp = client.get(f"/api/clients/c1/staff/report.csv?start={today}&end={today}")
    assert csv_resp.mimetype == "text/csv"
    assert csv_resp.data.decode("utf-8-sig").splitlines()[1].startswith(f"Aarav,{today},")

    assert client.get("/api/clients/c1/staff/report?start=2026-02-01&end=2026-01-01").status_code == 400


def test_guardian_notifications_follow_student_punches(client):
    client.post("/api/clients/c1/students/punch", json={"person_id": "S-1"})

    first = client.get("/api/clients/c1/students/S-1/notifications").get_json()["messages"]
    second = client.get("/api/clients/c1/students/S-1/notifications").get_json()["messages"]

    assert [m["message"] for m in first] == ["Anaya has checked in."]
    assert second == []


def test_default_report_window_follows_container_clock():
    store = InMemoryKeyValueStore({"staff_c1": json.dumps([{"id": "E-1", "name": "Aarav"}])})
    app = Flask(__name__)
    register(app, build_container(store=store, cooldown_seconds=0, clock=lambda: datetime(2024, 5, 1, 9, 0)))
    client = app.test_client()

    client.post("/api/clients/c1/staff/punch", json={"person_id": "E-1"})
    r = client.get("/api/clients/c1/staff/report")
    csv_resp = client.get("/api/clients/c1/staff/report.csv")

    assert [row["work_date"] for row in r.get_json()["rows"]] == ["2024-05-01"]
    assert "attendance_report_2024-05-01.csv" in csv_resp.headers["Content-Disposition"]
