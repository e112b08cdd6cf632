from datetime import date, datetime

from karma_manager.attendance.model import AttendanceReportRow
from karma_manager.reports.calculator.standard_calculator import StandardDurationCalculator


def _row(in_time, out_time):
    return AttendanceReportRow(
        person_id="E-1",
        name="A",
        work_date=date(2025, 1, 1),
        in_time=in_time,
        out_time=out_time,
    )


def test_standard_calculator_counts_whole_minutes():
    row = _row(datetime(2025, 1, 1, 8, 0), datetime(2025, 1, 1, 17, 0, 59))

    assert StandardDurationCalculator().worked_minutes(row) == 9 * 60


def test_open_record_has_no_duration():
    assert StandardDurationCalculator().worked_minutes(_row(datetime(2025, 1, 1, 8, 0), None)) is None
