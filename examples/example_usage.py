"""Example: use the attendance service layer directly (without Flask).

Controllers are a thin layer; the punch rules live in the ledger/services.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from karma_manager.container import build_container
from karma_manager.core.enums import PersonKind
from karma_manager.people.seed import DEMO_TENANT_ID, seed_demo_tenant
from karma_manager.storage.memory_store import InMemoryKeyValueStore


def main():
    store = InMemoryKeyValueStore()
    seed_demo_tenant(store)
    container = build_container(store=store, cooldown_seconds=0)

    for _ in range(3):
        outcome = container.attendance_service.punch(DEMO_TENANT_ID, PersonKind.STAFF, "E-1")
        print(outcome.action, "-", outcome.message)
    print(container.attendance_service.today_log(DEMO_TENANT_ID, PersonKind.STAFF))


if __name__ == "__main__":
    main()
