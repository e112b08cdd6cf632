from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Person
from .repository import PersonDirectory


class InMemoryPersonDirectory(PersonDirectory):
    def __init__(self, persons: Iterable[Person] = ()):
        self._by_id = {p.id: p for p in persons}

    def get_by_id(self, person_id: str) -> Optional[Person]:
        return self._by_id.get(person_id)

    def list_all(self) -> Sequence[Person]:
        return list(self._by_id.values())
