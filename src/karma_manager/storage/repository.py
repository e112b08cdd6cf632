from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Opaque get/set store for serialized payloads.

    Implementations raise StorageError when the backend fails.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
