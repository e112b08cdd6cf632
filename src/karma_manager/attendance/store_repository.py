from __future__ import annotations

import json
from typing import Optional, Sequence

from ..core.exceptions import StorageError
from ..storage.repository import KeyValueStore
from .model import PunchRecord
from .repository import AttendanceRepository


class KeyValueAttendanceRepository(AttendanceRepository):
    """Serializes a tenant's punch records as one JSON list under one store key."""

    def __init__(self, store: KeyValueStore, store_key: str):
        self._store = store
        self._store_key = store_key

    @property
    def store_key(self) -> str:
        return self._store_key

    def load(self) -> Optional[Sequence[PunchRecord]]:
        payload = self._store.get(self._store_key)
        if payload is None:
            return None

        try:
            items = json.loads(payload)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON list, got {type(items).__name__}")
            return [PunchRecord.from_dict(item) for item in items]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise StorageError(f"Corrupt attendance data under {self._store_key!r}: {e}") from e

    def save(self, records: Sequence[PunchRecord]) -> None:
        try:
            payload = json.dumps([r.to_dict() for r in records])
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize attendance data for {self._store_key!r}: {e}") from e
        self._store.set(self._store_key, payload)
