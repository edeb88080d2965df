from __future__ import annotations

from typing import Optional, Sequence

from ..common.academics import semesters_for_year
from ..common.validators import (
    require_choice,
    require_int_in_range,
    require_min_length,
    require_non_empty,
)
from ..core.constants import MIN_FULL_NAME_LENGTH, MIN_PASSWORD_LENGTH, YEARS_OF_STUDY
from ..core.enums import Gender
from ..core.exceptions import ValidationError
from .model import Student, StudentForm
from .repository import StudentRepository


def sort_by_roll(students: Sequence[Student]) -> list[Student]:
    return sorted(students, key=lambda s: s.roll_number)


class StudentService:
    """Use case: manage the student roster (faculty)."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_for_year(self, year_of_study: int, *, query: str = "") -> list[Student]:
        year = require_int_in_range(year_of_study, "Year of study", min(YEARS_OF_STUDY), max(YEARS_OF_STUDY))
        rows = sort_by_roll(self._students.list_by_year(year))
        query = (query or "").strip().lower()
        if query:
            rows = [s for s in rows if query in s.roll_number.lower() or query in s.branch_code.lower()]
        return rows

    def list_for_semester(self, semester: int) -> list[Student]:
        """Students whose year of study covers `semester`, sorted by roll number."""
        return sort_by_roll(
            s for s in self._students.list_all() if int(semester) in semesters_for_year(s.year_of_study)
        )

    def find_by_id(self, year_of_study: int, student_id: str) -> Optional[Student]:
        for s in self._students.list_by_year(int(year_of_study)):
            if s.student_id == student_id:
                return s
        return None

    def get_for_profile(self, profile_id: str) -> Optional[Student]:
        if not profile_id:
            return None
        return self._students.get_by_profile(profile_id)

    def build_form(self, data: dict, *, editing: bool = False) -> StudentForm:
        """Validate raw form input.

        On edit the name and password may be left blank (kept unchanged by the backend).
        """

        roll_number = require_non_empty(data.get("roll_number"), "Roll number")

        full_name = (data.get("full_name") or "").strip()
        if full_name or not editing:
            if len(full_name) < MIN_FULL_NAME_LENGTH:
                raise ValidationError("Full name is required")

        password = data.get("password") or ""
        if password or not editing:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        year = require_int_in_range(data.get("year_of_study"), "Year of study", min(YEARS_OF_STUDY), max(YEARS_OF_STUDY))
        gender = require_choice(data.get("gender"), "Gender", [g.value for g in Gender])
        branch_code = require_non_empty(data.get("branch_code"), "Branch code")
        phone_number = (data.get("phone_number") or "").strip() or None

        return StudentForm(
            roll_number=roll_number,
            year_of_study=year,
            gender=Gender(gender),
            branch_code=branch_code,
            full_name=full_name or None,
            password=password or None,
            phone_number=phone_number,
        )

    def create_student(self, data: dict) -> StudentForm:
        form = self.build_form(data)
        self._students.create(form)
        return form

    def update_student(self, student_id: str, data: dict) -> StudentForm:
        if not student_id:
            raise ValidationError("Student does not exist")
        form = self.build_form(data, editing=True)
        self._students.update(student_id, form)
        return form

    def delete_student(self, student_id: str) -> None:
        if not student_id:
            raise ValidationError("Student does not exist")
        self._students.delete(student_id)
