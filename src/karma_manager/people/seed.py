from __future__ import annotations

import json
import logging

from ..core.enums import PersonKind
from ..storage.repository import KeyValueStore
from ..tenants.context import directory_store_key

logger = logging.getLogger(__name__)

DEMO_TENANT_ID = "demo-client"

DEMO_PEOPLE = {
    PersonKind.STAFF: [
        {"id": "E-1", "name": "Aarav Sharma", "department": "Engineering", "status": "Active"},
        {"id": "E-2", "name": "Diya Patel", "department": "Sales", "status": "Active"},
        {"id": "E-3", "name": "Kabir Singh", "department": "Support", "status": "Inactive"},
    ],
    PersonKind.STUDENT: [
        {"id": "S-1", "name": "Anaya Gupta", "className": "5A", "rollNumber": "12", "status": "Active"},
        {"id": "S-2", "name": "Vihaan Rao", "className": "5A", "rollNumber": "13", "status": "Active"},
    ],
}


def seed_demo_tenant(store: KeyValueStore, tenant_id: str = DEMO_TENANT_ID) -> list[str]:
    """Write the demo staff/student lists for ``tenant_id``; existing lists are kept.

    Returns the keys that were written.
    """

    written = []
    for kind, people in DEMO_PEOPLE.items():
        key = directory_store_key(tenant_id, kind)
        if store.get(key) is not None:
            continue
        store.set(key, json.dumps(people))
        written.append(key)
    logger.info("Demo data seeded: %s", ", ".join(written) or "nothing to do", extra={"tenant_id": tenant_id})
    return written
