from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

from ..core.enums import PersonKind
from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStore
from .model import Person
from .repository import PersonDirectory

logger = logging.getLogger(__name__)


class StoredPersonDirectory(PersonDirectory):
    """Reads a tenant's staff or student list from the key-value store.

    The list is re-read on every call so people added by the management
    screens are visible without restarting. Unreadable data yields an
    empty directory.
    """

    def __init__(self, store: KeyValueStore, store_key: str, *, kind: PersonKind):
        self._store = store
        self._store_key = store_key
        self._kind = kind

    def _read(self) -> list[Person]:
        try:
            payload = self._store.get(self._store_key)
            if payload is None:
                return []
            return [Person.from_dict(item, kind=self._kind) for item in json.loads(payload)]
        except (StorageError, ValueError, KeyError, TypeError):
            logger.exception("Failed to read person directory %s", self._store_key, extra={"kind": self._kind.value})
            return []

    def get_by_id(self, person_id: str) -> Optional[Person]:
        for p in self._read():
            if p.id == person_id:
                return p
        return None

    def list_all(self) -> Sequence[Person]:
        return self._read()
