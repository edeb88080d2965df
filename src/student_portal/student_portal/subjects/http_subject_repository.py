from __future__ import annotations

from typing import Any, Dict, List

from ..backend.connection import ApiConnection
from ..backend.http_base import as_list, fetch_json, record_id
from ..core.enums import SubjectType
from .model import Subject
from .repository import SubjectRepository


def _to_subject(row: Dict[str, Any]) -> Subject:
    try:
        subject_type = SubjectType(row.get("type"))
    except ValueError:
        subject_type = None

    return Subject(
        subject_id=record_id(row),
        code=str(row.get("code") or ""),
        name=str(row.get("name") or ""),
        semester=int(row.get("semester") or 0),
        subject_type=subject_type,
        branch_code=str(row.get("branch_code") or ""),
        marks_scheme=dict(row.get("marks") or {}),
    )


class HttpSubjectRepository(SubjectRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> List[Subject]:
        data = fetch_json(self._conn, "GET", "/api/subjects", error_message="Failed to fetch subjects")
        return [_to_subject(r) for r in as_list(data, "data")]

    def create(self, subject: Subject) -> None:
        fetch_json(self._conn, "POST", "/api/subjects", json=subject.to_payload(), error_message="Failed to create subject")
