from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import TimePolicy
from .model import PunchRecord
from .strategies.base import PunchStrategy
from .strategies.punch_in_strategy import PunchInStrategy
from .strategies.punch_out_strategy import PunchOutStrategy


@dataclass
class PunchStrategyFactory:
    """Factory Pattern: choose the punch direction from the day's record.

    Only an open record (in set, out empty) turns the next punch into an
    out-punch; a missing, closed or in-less record gives an in-punch.
    """

    time_policy: TimePolicy = TimePolicy.CLAMP

    def for_record(self, existing: Optional[PunchRecord]) -> PunchStrategy:
        if existing is not None and existing.is_open:
            return PunchOutStrategy(self.time_policy)
        return PunchInStrategy()
