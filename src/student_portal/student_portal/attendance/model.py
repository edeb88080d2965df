from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.constants import TOTAL_PERIODS
from ..core.enums import DayStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance for one calendar date."""

    student_id: str
    work_date: date
    periods_present: int
    status: DayStatus
    total_periods: int = TOTAL_PERIODS
    marked_by: Optional[str] = None
    record_id: Optional[str] = None

    @property
    def month(self) -> int:
        return self.work_date.month

    @property
    def year(self) -> int:
        return self.work_date.year

    def to_payload(self) -> dict:
        return {
            "student_id": self.student_id,
            "date": self.work_date.isoformat(),
            "month": self.month,
            "year": self.year,
            "periods_present": self.periods_present,
            "total_periods": self.total_periods,
            "status": self.status.value,
            "marked_by": self.marked_by,
        }


@dataclass(frozen=True)
class SheetSummary:
    full: int
    half: int
    absent: int

    @property
    def total(self) -> int:
        return self.full + self.half + self.absent


@dataclass(frozen=True)
class MonthlySummary:
    """Read-model for the student monthly attendance page."""

    total_days: int
    present_days: int
    absent_days: int
    percentage: int
    part_one: list[AttendanceRecord] = field(default_factory=list)
    part_two: list[AttendanceRecord] = field(default_factory=list)
