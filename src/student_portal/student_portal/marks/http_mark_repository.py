from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..backend.connection import ApiConnection
from ..backend.http_base import as_list, fetch_json, record_id, ref_id
from ..core.enums import ExamType
from .model import Mark, MarkForm
from .repository import MarkRepository


def _to_mark(row: Dict[str, Any]) -> Mark:
    try:
        exam_type = ExamType(row.get("exam_type"))
    except ValueError:
        exam_type = None

    return Mark(
        mark_id=record_id(row),
        student_id=ref_id(row.get("student_id")),
        subject_id=ref_id(row.get("subject_id")),
        semester=int(row.get("semester") or 0),
        exam_type=exam_type,
        marks_obtained=float(row.get("marks_obtained") or 0),
        total_marks=float(row.get("total_marks") or 0),
        academic_year=str(row.get("academic_year") or ""),
        student_roll=row.get("student_roll") or None,
        subject_name=row.get("subject_name") or None,
        subject_code=row.get("subject_code") or None,
        entered_by=ref_id(row.get("entered_by")) or None,
    )


class HttpMarkRepository(MarkRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_marks(self, *, semester: Optional[int] = None, student_id: Optional[str] = None) -> List[Mark]:
        data = fetch_json(
            self._conn,
            "GET",
            "/api/marks",
            params={"semester": semester, "student_id": student_id},
            error_message="Failed to fetch marks",
        )
        return [_to_mark(r) for r in as_list(data, "data")]

    def create(self, form: MarkForm) -> None:
        fetch_json(self._conn, "POST", "/api/marks", json=form.to_payload(), error_message="Failed to save marks")

    def delete(self, mark_id: str) -> None:
        fetch_json(self._conn, "DELETE", f"/api/marks/{mark_id}", error_message="Failed to delete marks")
