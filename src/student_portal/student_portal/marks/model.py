from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ExamType


@dataclass(frozen=True)
class Mark:
    """Domain entity: marks for one exam of one subject.

    `combined` is only ever set on display rows produced by the combiner.
    """

    mark_id: str
    student_id: str
    subject_id: str
    semester: int
    exam_type: Optional[ExamType]
    marks_obtained: float
    total_marks: float
    academic_year: str = ""
    student_roll: Optional[str] = None
    subject_name: Optional[str] = None
    subject_code: Optional[str] = None
    entered_by: Optional[str] = None
    combined: bool = False

    @property
    def percentage(self) -> float:
        if not self.total_marks:
            return 0.0
        return self.marks_obtained / self.total_marks * 100


@dataclass(frozen=True)
class MarkForm:
    student_id: str
    subject_id: str
    semester: int
    exam_type: ExamType
    marks_obtained: float
    total_marks: float
    academic_year: str
    entered_by: Optional[str]

    def to_payload(self) -> dict:
        return {
            "student_id": self.student_id,
            "subject_id": self.subject_id,
            "semester": self.semester,
            "exam_type": self.exam_type.value,
            "marks_obtained": self.marks_obtained,
            "total_marks": self.total_marks,
            "academic_year": self.academic_year,
            "entered_by": self.entered_by,
        }


@dataclass(frozen=True)
class MarkRow:
    """Read-model for the marks tables."""

    mark: Mark
    percentage: float
    band: str
    passed: bool

    @property
    def deletable(self) -> bool:
        return not self.mark.combined


@dataclass(frozen=True)
class StudentMarksReport:
    semester: int
    rows: list[MarkRow]
    by_exam_type: dict[str, list[MarkRow]]
    total_obtained: float
    total_max: float
    overall_percentage: int
