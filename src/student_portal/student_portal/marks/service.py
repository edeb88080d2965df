from __future__ import annotations

from typing import Optional, Sequence

from ..common.percent import round_one_decimal, rounded_percentage
from ..common.validators import require_int_in_range, require_non_empty, require_number
from ..core.constants import (
    DEFAULT_ACADEMIC_YEAR,
    GOOD_PERCENTAGE,
    MAX_SEMESTER,
    MIN_SEMESTER,
    PASS_PERCENTAGE,
)
from ..core.enums import ExamType, SubjectType
from ..core.exceptions import ValidationError
from ..subjects.repository import SubjectRepository
from .combiner import ALL, combine_marks
from .model import Mark, MarkForm, MarkRow, StudentMarksReport
from .repository import MarkRepository

SUBJECT_TYPE_FILTERS = (ALL, SubjectType.THEORY.value, SubjectType.LAB.value)


def band_for(percentage: float) -> str:
    if percentage >= GOOD_PERCENTAGE:
        return "good"
    if percentage >= PASS_PERCENTAGE:
        return "average"
    return "poor"


def to_row(mark: Mark) -> MarkRow:
    percentage = round_one_decimal(mark.percentage)
    return MarkRow(mark=mark, percentage=percentage, band=band_for(percentage), passed=percentage >= PASS_PERCENTAGE)


def average_percentage(marks: Sequence[Mark]) -> int:
    """Mean of the per-exam percentages, rounded; 0 without marks."""
    if not marks:
        return 0
    return rounded_percentage(sum(m.percentage for m in marks), len(marks) * 100)


class MarksService:
    """Use cases around exam marks (faculty entry, student read-only view)."""

    def __init__(self, marks: MarkRepository, subjects: SubjectRepository, *, academic_year: str = DEFAULT_ACADEMIC_YEAR):
        self._marks = marks
        self._subjects = subjects
        self._academic_year = academic_year

    def faculty_view(self, *, semester, subject_type: str = ALL, student_id: Optional[str] = ALL) -> list[MarkRow]:
        semester = require_int_in_range(semester, "Semester", MIN_SEMESTER, MAX_SEMESTER)
        if subject_type not in SUBJECT_TYPE_FILTERS:
            subject_type = ALL
        selected = student_id if student_id and student_id != ALL else None

        subjects = [s for s in self._subjects.list_all() if s.semester == semester]
        marks = list(self._marks.list_marks(semester=semester, student_id=selected))
        if subject_type != ALL:
            allowed = {s.subject_id for s in subjects if s.subject_type and s.subject_type.value == subject_type}
            marks = [m for m in marks if m.subject_id in allowed]

        combined = combine_marks(marks, subjects, subject_type=subject_type, student_id=selected or ALL)
        return [to_row(m) for m in combined]

    def add_mark(self, data: dict, *, semester, entered_by: Optional[str]) -> MarkForm:
        semester = require_int_in_range(semester, "Semester", MIN_SEMESTER, MAX_SEMESTER)
        student_id = require_non_empty(data.get("student_id"), "Student")
        subject_id = require_non_empty(data.get("subject_id"), "Subject")
        obtained = require_number(data.get("marks_obtained"), "Marks obtained")
        total = require_number(data.get("total_marks"), "Total marks")

        if obtained < 0 or total <= 0:
            raise ValidationError("Invalid marks values")
        if obtained > total:
            raise ValidationError("Marks obtained cannot exceed total marks")

        subject = next((s for s in self._subjects.list_all() if s.subject_id == subject_id), None)
        raw_exam_type = (data.get("exam_type") or "").strip()
        if raw_exam_type:
            try:
                exam_type = ExamType(raw_exam_type)
            except ValueError:
                raise ValidationError("Invalid exam type")
        elif subject and subject.subject_type == SubjectType.LAB:
            exam_type = ExamType.LAB_INTERNAL
        else:
            exam_type = ExamType.UNIT_TEST_INTERNAL

        form = MarkForm(
            student_id=student_id,
            subject_id=subject_id,
            semester=semester,
            exam_type=exam_type,
            marks_obtained=obtained,
            total_marks=total,
            academic_year=(data.get("academic_year") or "").strip() or self._academic_year,
            entered_by=entered_by,
        )
        self._marks.create(form)
        return form

    def delete_mark(self, mark_id: str) -> None:
        if not mark_id:
            raise ValidationError("Marks entry does not exist")
        self._marks.delete(mark_id)

    def student_report(self, *, student_id: str, semester) -> StudentMarksReport:
        semester = require_int_in_range(semester, "Semester", MIN_SEMESTER, MAX_SEMESTER)
        marks = list(self._marks.list_marks(semester=semester, student_id=student_id))
        rows = [to_row(m) for m in marks]

        by_exam_type: dict[str, list[MarkRow]] = {}
        for row in rows:
            key = row.mark.exam_type.value if row.mark.exam_type else "other"
            by_exam_type.setdefault(key, []).append(row)

        total_obtained = sum(m.marks_obtained for m in marks)
        total_max = sum(m.total_marks for m in marks)
        return StudentMarksReport(
            semester=semester,
            rows=rows,
            by_exam_type=by_exam_type,
            total_obtained=total_obtained,
            total_max=total_max,
            overall_percentage=rounded_percentage(total_obtained, total_max),
        )

    def list_for_student(self, student_id: str) -> list[Mark]:
        return list(self._marks.list_marks(student_id=student_id))
