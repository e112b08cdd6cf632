from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceReportRow
from .base import DurationCalculator


class StandardDurationCalculator(DurationCalculator):
    """Whole minutes between in and out; None while the record is open."""

    def worked_minutes(self, row: AttendanceReportRow) -> Optional[int]:
        if not row.in_time or not row.out_time:
            return None
        seconds = int((row.out_time - row.in_time).total_seconds())
        return max(0, seconds // 60)
