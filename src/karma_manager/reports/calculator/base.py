from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceReportRow


class DurationCalculator(ABC):
    """Strategy for how many minutes a report row counts as worked."""

    @abstractmethod
    def worked_minutes(self, row: AttendanceReportRow) -> Optional[int]:
        raise NotImplementedError
