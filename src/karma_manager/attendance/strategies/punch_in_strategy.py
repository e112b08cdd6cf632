from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import Direction
from ..model import PunchRecord
from .base import PunchStrategy


class PunchInStrategy(PunchStrategy):
    """First punch of the day, or re-opening a closed pair (overwrites it)."""

    direction = Direction.IN

    def apply(self, *, existing: Optional[PunchRecord], person_id: str, today: date, now: datetime) -> PunchRecord:
        if existing is not None:
            return existing.with_in(now)
        return PunchRecord(person_id=person_id, work_date=today, in_time=now, out_time=None)
