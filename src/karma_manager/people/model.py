from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import PersonKind, PersonStatus


@dataclass(frozen=True)
class Person:
    """Thực thể miền (domain): nhân viên hoặc học sinh của một tenant.

    Only the fields attendance needs are kept; the rest of the stored
    profile (contact details, salary, guardians, ...) is ignored.
    """

    id: str
    name: str
    kind: PersonKind
    status: PersonStatus = PersonStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == PersonStatus.ACTIVE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, kind: PersonKind) -> "Person":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            kind=kind,
            status=PersonStatus(data.get("status") or PersonStatus.ACTIVE.value),
        )
