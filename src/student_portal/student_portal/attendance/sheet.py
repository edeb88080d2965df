from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..core.constants import TOTAL_PERIODS
from ..core.exceptions import ValidationError
from ..students.model import Student
from .model import AttendanceRecord, SheetSummary
from .strategies.base import DayStatusStrategy, StatusDecision
from .strategies.threshold_strategy import PeriodThresholdStrategy


class AttendanceSheet:
    """Editable per-student, per-period matrix for one day and one roster.

    Periods are numbered from 1. Cells are independent; a student's status is
    derived from the row each time it is read.
    """

    def __init__(
        self,
        *,
        roster: Sequence[Student],
        work_date: date,
        total_periods: int = TOTAL_PERIODS,
        strategy: Optional[DayStatusStrategy] = None,
    ):
        self._roster = list(roster)
        self._work_date = work_date
        self._total = int(total_periods)
        self._strategy = strategy or PeriodThresholdStrategy()
        self._matrix: dict[str, list[bool]] = {s.student_id: [False] * self._total for s in self._roster}

    @classmethod
    def from_records(
        cls,
        *,
        roster: Sequence[Student],
        work_date: date,
        records: Iterable[AttendanceRecord],
        strategy: Optional[DayStatusStrategy] = None,
    ) -> "AttendanceSheet":
        """Seed rows from stored counts; only the count is stored, so the first N periods are marked."""
        sheet = cls(roster=roster, work_date=work_date, strategy=strategy)
        for r in records:
            row = sheet._matrix.get(r.student_id)
            if row is None:
                continue
            present = max(0, min(int(r.periods_present), sheet._total))
            for i in range(sheet._total):
                row[i] = i < present
        return sheet

    @classmethod
    def from_form(
        cls,
        *,
        roster: Sequence[Student],
        work_date: date,
        form: Mapping[str, str],
        strategy: Optional[DayStatusStrategy] = None,
    ) -> "AttendanceSheet":
        sheet = cls(roster=roster, work_date=work_date, strategy=strategy)
        for sid, row in sheet._matrix.items():
            for i in range(sheet._total):
                row[i] = cls.field_name(sid, i + 1) in form
        return sheet

    @staticmethod
    def field_name(student_id: str, period: int) -> str:
        return f"p-{student_id}-{period}"

    @property
    def roster(self) -> list[Student]:
        return list(self._roster)

    @property
    def work_date(self) -> date:
        return self._work_date

    @property
    def total_periods(self) -> int:
        return self._total

    def _row(self, student_id: str) -> list[bool]:
        try:
            return self._matrix[student_id]
        except KeyError:
            raise ValidationError("Student is not on this attendance sheet")

    def _index(self, period: int) -> int:
        if period < 1 or period > self._total:
            raise ValidationError(f"Period must be between 1 and {self._total}")
        return period - 1

    def periods(self, student_id: str) -> tuple[bool, ...]:
        return tuple(self._row(student_id))

    def is_marked(self, student_id: str, period: int) -> bool:
        return self._row(student_id)[self._index(period)]

    def set_period(self, student_id: str, period: int, value: bool) -> None:
        self._row(student_id)[self._index(period)] = bool(value)

    def toggle(self, student_id: str, period: int) -> None:
        row = self._row(student_id)
        idx = self._index(period)
        row[idx] = not row[idx]

    def mark_all(self, value: bool) -> None:
        """Overwrite every period of every visible student."""
        for sid in self._matrix:
            self._matrix[sid] = [bool(value)] * self._total

    def periods_present(self, student_id: str) -> int:
        return sum(1 for p in self._row(student_id) if p)

    def decision(self, student_id: str) -> StatusDecision:
        return self._strategy.decide(periods_present=self.periods_present(student_id), total_periods=self._total)

    def summary(self) -> SheetSummary:
        counts = {"full": 0, "half": 0, "absent": 0}
        for s in self._roster:
            status = self.decision(s.student_id).status
            counts[status.name.lower()] += 1
        return SheetSummary(**counts)

    def to_records(self, *, marked_by: Optional[str]) -> list[AttendanceRecord]:
        """One record per visible student, whether or not the row was edited."""
        out: list[AttendanceRecord] = []
        for s in self._roster:
            d = self.decision(s.student_id)
            out.append(
                AttendanceRecord(
                    student_id=s.student_id,
                    work_date=self._work_date,
                    periods_present=d.periods_present,
                    total_periods=d.total_periods,
                    status=d.status,
                    marked_by=marked_by,
                )
            )
        return out
