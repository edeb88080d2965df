from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..backend.connection import ApiConnection
from ..backend.http_base import as_list, fetch_json, first_or_none, record_id
from ..core.enums import Gender
from .model import Student, StudentForm
from .repository import StudentRepository


def _to_student(row: Dict[str, Any]) -> Student:
    try:
        gender = Gender(row.get("gender") or Gender.OTHER.value)
    except ValueError:
        gender = Gender.OTHER

    return Student(
        student_id=record_id(row),
        roll_number=str(row.get("roll_number") or ""),
        year_of_study=int(row.get("year_of_study") or 0),
        branch_code=str(row.get("branch_code") or ""),
        gender=gender,
        phone_number=row.get("phone_number") or None,
        profile_id=row.get("profile_id") or None,
        full_name=row.get("full_name") or None,
        created_at=row.get("created_at") or None,
    )


class HttpStudentRepository(StudentRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> List[Student]:
        data = fetch_json(self._conn, "GET", "/api/students", error_message="Failed to fetch students")
        return [_to_student(r) for r in as_list(data, "students", "data")]

    def list_by_year(self, year_of_study: int) -> List[Student]:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/students",
            params={"year_of_study": int(year_of_study)},
            error_message="Failed to fetch students",
        )
        return [_to_student(r) for r in as_list(data, "students", "data")]

    def get_by_profile(self, profile_id: str) -> Optional[Student]:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/students",
            params={"profile_id": profile_id},
            error_message="Failed to fetch student",
        )
        row = first_or_none(data)
        return _to_student(row) if row else None

    def create(self, form: StudentForm) -> None:
        fetch_json(self._conn, "POST", "/api/students", json=form.to_payload(), error_message="Failed to save student")

    def update(self, student_id: str, form: StudentForm) -> None:
        fetch_json(
            self._conn,
            "PUT",
            f"/api/students/{student_id}",
            json=form.to_payload(),
            error_message="Failed to save student",
        )

    def delete(self, student_id: str) -> None:
        fetch_json(self._conn, "DELETE", f"/api/students/{student_id}", error_message="Failed to delete student")
