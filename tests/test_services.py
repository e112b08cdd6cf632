from __future__ import annotations

import json
from datetime import date, datetime, timedelta

import pytest

from karma_manager.attendance.service import AttendanceService
from karma_manager.core.enums import Direction, PersonKind
from karma_manager.core.exceptions import PunchCooldownError, UnknownPersonError
from karma_manager.storage.memory_store import InMemoryKeyValueStore
from karma_manager.tenants.context import TenantRegistry

STAFF = [
    {"id": "E-1", "name": "Aarav", "status": "Active"},
    {"id": "E-2", "name": "Diya", "status": "Inactive"},
]
STUDENTS = [{"id": "S-1", "name": "Anaya"}]


def make_service(fixed_now, cooldown_seconds=0):
    store = InMemoryKeyValueStore()
    for tenant_id in ("c1", "c2"):
        store.set(f"staff_{tenant_id}", json.dumps(STAFF))
        store.set(f"students_{tenant_id}", json.dumps(STUDENTS))
    tenants = TenantRegistry(store, clock=lambda: fixed_now)
    return AttendanceService(tenants, cooldown_seconds=cooldown_seconds), tenants


def test_punch_alternates_and_builds_messages(fixed_now):
    svc, _ = make_service(fixed_now)

    first = svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now)
    second = svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now + timedelta(hours=8))

    assert first.direction == Direction.IN
    assert first.action == "Clock In"
    assert first.message == "Welcome, Aarav!"
    assert second.direction == Direction.OUT
    assert second.message == "Goodbye, Aarav!"
    assert second.record.out_time == fixed_now + timedelta(hours=8)


def test_punch_uses_ledger_clock_by_default(fixed_now):
    svc, _ = make_service(fixed_now)

    outcome = svc.punch("c1", PersonKind.STAFF, "E-1")

    assert outcome.record.in_time == fixed_now


def test_unknown_person_is_rejected_without_touching_ledger(fixed_now):
    svc, _ = make_service(fixed_now)

    with pytest.raises(UnknownPersonError):
        svc.punch("c1", PersonKind.STAFF, "nobody", now=fixed_now)
    # staff ids are not valid student ids
    with pytest.raises(UnknownPersonError):
        svc.punch("c1", PersonKind.STUDENT, "E-1", now=fixed_now)

    assert svc.list_records("c1", PersonKind.STAFF) == ()
    assert svc.list_records("c1", PersonKind.STUDENT) == ()


def test_inactive_person_cannot_punch(fixed_now):
    svc, _ = make_service(fixed_now)

    with pytest.raises(UnknownPersonError):
        svc.punch("c1", PersonKind.STAFF, "E-2", now=fixed_now)


def test_cooldown_blocks_quick_repeat(fixed_now):
    svc, _ = make_service(fixed_now, cooldown_seconds=300)

    svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now)
    with pytest.raises(PunchCooldownError, match="Aarav already checked in recently"):
        svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now + timedelta(minutes=4))

    later = svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now + timedelta(minutes=5))
    assert later.direction == Direction.OUT


def test_cooldown_is_per_tenant_and_person(fixed_now):
    svc, _ = make_service(fixed_now, cooldown_seconds=300)

    svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now)

    assert svc.punch("c2", PersonKind.STAFF, "E-1", now=fixed_now).direction == Direction.IN
    assert svc.punch("c1", PersonKind.STUDENT, "S-1", now=fixed_now).direction == Direction.IN


def test_tenants_are_isolated(fixed_now):
    svc, _ = make_service(fixed_now)

    svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now)

    assert len(svc.list_records("c1", PersonKind.STAFF)) == 1
    assert svc.list_records("c2", PersonKind.STAFF) == ()


def test_today_log_joins_names(fixed_now):
    svc, _ = make_service(fixed_now)
    svc.punch("c1", PersonKind.STAFF, "E-1", now=fixed_now)
    svc.punch("c1", PersonKind.STAFF, "E-1", now=datetime(2024, 5, 2, 9, 0))

    rows = svc.today_log("c1", PersonKind.STAFF, date(2024, 5, 1))

    assert rows == [
        {
            "person_id": "E-1",
            "name": "Aarav",
            "date": "2024-05-01",
            "in_time": "09:00:00",
            "out_time": "-",
            "status": "In",
        }
    ]
    assert len(svc.today_log("c1", PersonKind.STAFF)) == 1
