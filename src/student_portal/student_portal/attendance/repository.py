from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(
        self,
        student_id: str,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_day(self, *, work_date: date, records: Sequence[AttendanceRecord]) -> None:
        """Batch upsert of a full day; the backend replaces per (student, date)."""

        raise NotImplementedError
