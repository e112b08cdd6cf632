from __future__ import annotations

import json
from datetime import datetime

from karma_manager.core.enums import Direction, PersonKind
from karma_manager.notifications.guardian import GuardianNotifier
from karma_manager.people.model import Person
from karma_manager.storage.memory_store import InMemoryKeyValueStore
from karma_manager.tenants.context import TenantRegistry

ANAYA = Person("S-1", "Anaya", PersonKind.STUDENT)


def make_registry(notifier: GuardianNotifier) -> TenantRegistry:
    store = InMemoryKeyValueStore({"students_c1": json.dumps([{"id": "S-1", "name": "Anaya"}])})
    registry = TenantRegistry(store)
    registry.add_open_hook(notifier.attach)
    return registry


def test_student_punches_queue_messages_in_order():
    notifier = GuardianNotifier()
    ledger = make_registry(notifier).get("c1").ledger(PersonKind.STUDENT)

    ledger.record_punch(ANAYA, now=datetime(2024, 5, 1, 8, 0))
    ledger.record_punch(ANAYA, now=datetime(2024, 5, 1, 14, 0))

    messages = notifier.drain("c1", "S-1")
    assert [m.message for m in messages] == ["Anaya has checked in.", "Anaya has checked out."]
    assert [m.direction for m in messages] == [Direction.IN, Direction.OUT]
    assert messages[1].at == datetime(2024, 5, 1, 14, 0)


def test_drain_delivers_at_most_once():
    notifier = GuardianNotifier()
    ledger = make_registry(notifier).get("c1").ledger(PersonKind.STUDENT)
    ledger.record_punch(ANAYA, now=datetime(2024, 5, 1, 8, 0))

    assert len(notifier.drain("c1", "S-1")) == 1
    assert notifier.drain("c1", "S-1") == []
    assert notifier.drain("c2", "S-1") == []


def test_staff_punches_are_not_forwarded():
    notifier = GuardianNotifier()
    ctx = make_registry(notifier).get("c1")

    ctx.ledger(PersonKind.STAFF).record_punch(Person("S-1", "Same id", PersonKind.STAFF), now=datetime(2024, 5, 1, 8, 0))

    assert notifier.drain("c1", "S-1") == []


def test_queue_is_bounded():
    notifier = GuardianNotifier(max_per_student=2)
    ledger = make_registry(notifier).get("c1").ledger(PersonKind.STUDENT)
    for hour in (8, 9, 10):
        ledger.record_punch(ANAYA, now=datetime(2024, 5, 1, hour, 0))

    messages = notifier.drain("c1", "S-1")
    assert [m.direction for m in messages] == [Direction.OUT, Direction.IN]
