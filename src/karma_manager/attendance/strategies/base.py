from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from ...core.enums import Direction
from ..model import PunchRecord


class PunchStrategy(ABC):
    """Strategy Pattern: encapsulate how a punch changes the day's record."""

    direction: Direction

    @abstractmethod
    def apply(self, *, existing: Optional[PunchRecord], person_id: str, today: date, now: datetime) -> PunchRecord:
        raise NotImplementedError
