from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..students.model import Student


@dataclass(frozen=True)
class FacultyStats:
    total_students: int
    attendance_today: int
    avg_attendance: int
    total_subjects: int


@dataclass(frozen=True)
class FacultyDashboard:
    year_of_study: int
    stats: FacultyStats
    recent_students: list[Student] = field(default_factory=list)


@dataclass(frozen=True)
class StudentDashboard:
    """`student` is None while the account is not linked to a student record."""

    student: Optional[Student]
    attendance_percentage: int = 0
    total_subjects: int = 0
    avg_marks: int = 0
    total_exams: int = 0

    @property
    def linked(self) -> bool:
        return self.student is not None
