from __future__ import annotations

from typing import Optional

from .repository import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store; contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return sorted(self._data)
