from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import Direction


@dataclass(frozen=True)
class PunchRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một người trong một ngày."""

    person_id: str
    work_date: date
    in_time: Optional[datetime]
    out_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.in_time is not None and self.out_time is None

    def key(self) -> tuple[str, date]:
        return (self.person_id, self.work_date)

    def with_in(self, now: datetime) -> "PunchRecord":
        return replace(self, in_time=now, out_time=None)

    def with_out(self, now: datetime) -> "PunchRecord":
        return replace(self, out_time=now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "personId": self.person_id,
            "date": format_iso_date(self.work_date),
            "inTime": format_timestamp(self.in_time),
            "outTime": format_timestamp(self.out_time),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PunchRecord":
        return cls(
            person_id=str(data["personId"]),
            work_date=parse_iso_date(data["date"]),
            in_time=parse_timestamp(data.get("inTime")),
            out_time=parse_timestamp(data.get("outTime")),
        )


@dataclass(frozen=True)
class PunchEvent:
    """Published by a ledger after each punch has been applied."""

    tenant_id: str
    person_id: str
    direction: Direction
    record: PunchRecord


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model phục vụ báo cáo/xuất file."""

    person_id: str
    name: str
    work_date: date
    in_time: Optional[datetime]
    out_time: Optional[datetime]
