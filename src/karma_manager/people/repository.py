from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Person


class PersonDirectory(Protocol):
    """Read-only lookup of the persons a ledger may punch."""

    def get_by_id(self, person_id: str) -> Optional[Person]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Person]:
        raise NotImplementedError
