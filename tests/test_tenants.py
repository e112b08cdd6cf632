from __future__ import annotations

from datetime import datetime

from karma_manager.core.enums import Direction, PersonKind
from karma_manager.people.memory_directory import InMemoryPersonDirectory
from karma_manager.people.model import Person
from karma_manager.storage.memory_store import InMemoryKeyValueStore
from karma_manager.tenants.context import TenantRegistry, attendance_store_key, directory_store_key, open_tenant


def test_store_keys_follow_tenant_partitioning():
    assert attendance_store_key("c1", PersonKind.STAFF) == "attendance_c1"
    assert attendance_store_key("c1", PersonKind.STUDENT) == "student_attendance_c1"
    assert directory_store_key("c1", PersonKind.STAFF) == "staff_c1"
    assert directory_store_key("c1", PersonKind.STUDENT) == "students_c1"


def test_staff_and_student_ledgers_share_no_state():
    store = InMemoryKeyValueStore()
    ctx = open_tenant("c1", store)
    now = datetime(2024, 5, 1, 9, 0)

    ctx.ledger(PersonKind.STAFF).record_punch(Person("X-1", "Staff", PersonKind.STAFF), now=now)

    assert ctx.ledger(PersonKind.STUDENT).list_records() == ()
    assert store.keys() == ["attendance_c1"]


def test_explicit_directories_are_used():
    anaya = Person("S-1", "Anaya", PersonKind.STUDENT)
    ctx = open_tenant(
        "c1",
        InMemoryKeyValueStore(),
        directories={
            PersonKind.STAFF: InMemoryPersonDirectory(),
            PersonKind.STUDENT: InMemoryPersonDirectory([anaya]),
        },
    )

    assert ctx.directory(PersonKind.STUDENT).get_by_id("S-1") == anaya
    assert ctx.directory(PersonKind.STAFF).list_all() == []


def test_registry_opens_each_tenant_once_and_runs_hooks():
    registry = TenantRegistry(InMemoryKeyValueStore())
    opened = []
    registry.add_open_hook(lambda ctx: opened.append(ctx.tenant_id))

    first = registry.get("c1")
    assert registry.get("c1") is first
    registry.get("c2")

    assert opened == ["c1", "c2"]


def test_registry_reopens_persisted_state_after_restart():
    store = InMemoryKeyValueStore()
    now = datetime(2024, 5, 1, 9, 0)
    TenantRegistry(store).get("c1").ledger(PersonKind.STAFF).record_punch(Person("E-1", "A", PersonKind.STAFF), now=now)

    ledger = TenantRegistry(store).get("c1").ledger(PersonKind.STAFF)

    assert ledger.record_punch(Person("E-1", "A", PersonKind.STAFF), now=now.replace(hour=17)) == Direction.OUT
