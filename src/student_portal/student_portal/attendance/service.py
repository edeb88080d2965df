from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_int_in_range
from ..core.constants import YEARS_OF_STUDY
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from ..students.service import sort_by_roll
from .aggregation import attendance_percentage, count_present, summarize_month
from .model import MonthlySummary
from .repository import AttendanceRepository
from .sheet import AttendanceSheet
from .strategies.base import DayStatusStrategy
from .strategies.threshold_strategy import PeriodThresholdStrategy

logger = logging.getLogger(__name__)

BULK_ACTIONS = {"mark_all_present": True, "mark_all_absent": False}


class FacultyAttendanceService:
    """Use case: take a day's period attendance for one year of study."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        strategy: Optional[DayStatusStrategy] = None,
        clock: Callable[[], date] = today_local,
    ):
        self._attendance = attendance
        self._students = students
        self._strategy = strategy or PeriodThresholdStrategy()
        self._clock = clock

    def _check_date(self, work_date: date) -> None:
        if work_date > self._clock():
            raise ValidationError("Attendance cannot be taken for a future date")

    def _check_filters(self, year_of_study, work_date: date) -> int:
        year = require_int_in_range(year_of_study, "Year of study", min(YEARS_OF_STUDY), max(YEARS_OF_STUDY))
        self._check_date(work_date)
        return year

    def _roster(self, year: int):
        return sort_by_roll(self._students.list_by_year(year))

    def load_sheet(self, *, year_of_study, work_date: date) -> AttendanceSheet:
        year = self._check_filters(year_of_study, work_date)
        roster = self._roster(year)
        records = self._attendance.list_for_date(work_date)
        return AttendanceSheet.from_records(roster=roster, work_date=work_date, records=records, strategy=self._strategy)

    def sheet_from_form(
        self,
        *,
        year_of_study,
        work_date: date,
        form: Mapping[str, str],
        action: Optional[str] = None,
    ) -> AttendanceSheet:
        """Rebuild the submitted matrix, then apply a bulk action if one was requested."""

        year = self._check_filters(year_of_study, work_date)
        sheet = AttendanceSheet.from_form(
            roster=self._roster(year),
            work_date=work_date,
            form=form,
            strategy=self._strategy,
        )
        if action in BULK_ACTIONS:
            sheet.mark_all(BULK_ACTIONS[action])
        return sheet

    def save_sheet(self, sheet: AttendanceSheet, *, marked_by: Optional[str]) -> int:
        """Submit the full day for the visible roster. The sheet itself is never modified."""

        self._check_date(sheet.work_date)
        records = sheet.to_records(marked_by=marked_by)
        self._attendance.save_day(work_date=sheet.work_date, records=records)
        logger.info("Saved attendance for %s: %d records", sheet.work_date.isoformat(), len(records))
        return len(records)


class StudentAttendanceService:
    """Use case: a student's read-only attendance views."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def monthly_summary(self, *, student_id: str, month, year) -> MonthlySummary:
        month = require_int_in_range(month, "Month", 1, 12)
        year = require_int_in_range(year, "Year", 1900, 9999)
        records = self._attendance.list_for_student(student_id, month=month, year=year)
        return summarize_month(list(records))

    def overall_percentage(self, student_id: str) -> int:
        records = list(self._attendance.list_for_student(student_id))
        return attendance_percentage(count_present(records), len(records))

    def export_rows(self, *, student_id: str, month, year) -> list[dict]:
        summary = self.monthly_summary(student_id=student_id, month=month, year=year)
        rows: list[dict] = []
        for part, records in ((1, summary.part_one), (2, summary.part_two)):
            for r in records:
                rows.append(
                    {
                        "date": r.work_date.isoformat(),
                        "part": part,
                        "status": r.status.value,
                        "periods_present": r.periods_present,
                        "total_periods": r.total_periods,
                    }
                )
        return rows
