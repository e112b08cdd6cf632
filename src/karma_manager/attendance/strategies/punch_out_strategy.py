from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ...core.enums import Direction, TimePolicy
from ...core.exceptions import OutOfOrderPunchError
from ..model import PunchRecord
from .base import PunchStrategy

logger = logging.getLogger(__name__)


def _precedes(candidate: datetime, reference: datetime) -> bool:
    # Naive and aware timestamps cannot be ordered; treat them as in order.
    if (candidate.tzinfo is None) != (reference.tzinfo is None):
        return False
    return candidate < reference


class PunchOutStrategy(PunchStrategy):
    """Closes the open in-punch of the day."""

    direction = Direction.OUT

    def __init__(self, time_policy: TimePolicy = TimePolicy.CLAMP):
        self._time_policy = time_policy

    def apply(self, *, existing: Optional[PunchRecord], person_id: str, today: date, now: datetime) -> PunchRecord:
        if existing is None or not existing.is_open:
            raise ValueError("out-punch requires an open record")

        if not _precedes(now, existing.in_time):
            return existing.with_out(now)

        if self._time_policy == TimePolicy.REJECT:
            raise OutOfOrderPunchError(
                f"Out-punch at {now.isoformat()} precedes in-punch at {existing.in_time.isoformat()}"
            )
        if self._time_policy == TimePolicy.CLAMP:
            logger.warning(
                "Out-punch precedes in-punch; clamping to in-time",
                extra={"person_id": person_id, "direction": self.direction.value},
            )
            return existing.with_out(existing.in_time)
        return existing.with_out(now)
