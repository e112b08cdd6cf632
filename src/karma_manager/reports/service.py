from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceReportRow
from ..core.constants import UNKNOWN_PERSON_LABEL
from ..core.enums import PersonKind
from ..core.exceptions import ValidationError
from ..tenants.context import TenantRegistry
from .calculator.base import DurationCalculator
from .calculator.standard_calculator import StandardDurationCalculator

CSV_FIELDS = ["Name", "Date", "In Time", "Out Time", "Total Hours"]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def _fmt_minutes(minutes: Optional[int]) -> str:
    if minutes is None:
        return "-"
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class AttendanceReportService:
    def __init__(
        self,
        tenants: TenantRegistry,
        *,
        calculator: Optional[DurationCalculator] = None,
    ):
        self._tenants = tenants
        self._calculator = calculator or StandardDurationCalculator()

    def _query_rows(self, tenant_id: str, kind: PersonKind, start: date, end: date) -> list[AttendanceReportRow]:
        ctx = self._tenants.get(tenant_id)
        names = {p.id: p.name for p in ctx.directory(kind).list_all()}
        rows = [
            AttendanceReportRow(
                person_id=r.person_id,
                name=names.get(r.person_id) or UNKNOWN_PERSON_LABEL[kind.value],
                work_date=r.work_date,
                in_time=r.in_time,
                out_time=r.out_time,
            )
            for r in ctx.ledger(kind).list_records()
            if start <= r.work_date <= end
        ]
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return rows

    def build_report(self, *, tenant_id: str, kind: PersonKind, start: date, end: date) -> ReportData:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in self._query_rows(tenant_id, kind, start, end):
            minutes = self._calculator.worked_minutes(r)

            out_rows.append(
                {
                    "person_id": r.person_id,
                    "name": r.name,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "in_time": r.in_time.strftime("%H:%M") if r.in_time else "-",
                    "out_time": r.out_time.strftime("%H:%M") if r.out_time else "-",
                    "worked_hours": _fmt_minutes(minutes),
                }
            )

            s = summary_map.get(r.person_id)
            if not s:
                s = {
                    "person_id": r.person_id,
                    "name": r.name,
                    "days": 0,
                    "total_minutes": 0,
                }
                summary_map[r.person_id] = s
            s["days"] += 1
            s["total_minutes"] += minutes or 0

        summary = [
            {
                "person_id": s["person_id"],
                "name": s["name"],
                "days": s["days"],
                "total_hours": _fmt_minutes(int(s["total_minutes"])),
                "total_minutes": int(s["total_minutes"]),
            }
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: x["total_minutes"], reverse=True)
        return ReportData(rows=out_rows, summary=summary)


def write_report_csv(report: ReportData) -> bytes:
    """Render report rows as CSV (UTF-8 with BOM so spreadsheets detect the encoding)."""

    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_FIELDS)
    for row in report.rows:
        writer.writerow([row["name"], row["work_date"], row["in_time"], row["out_time"], row["worked_hours"]])
    return out.getvalue().encode("utf-8-sig")
