from __future__ import annotations

from ..common.academics import semesters_for_year
from ..common.validators import require_choice, require_int_in_range, require_non_empty
from ..core.constants import MAX_SEMESTER, MIN_SEMESTER
from ..core.enums import SubjectType
from .model import Subject
from .repository import SubjectRepository

DEFAULT_SCHEME = {"ut": 20, "external": 80, "sessional": 40}


class SubjectService:
    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def list_all(self) -> list[Subject]:
        return list(self._subjects.list_all())

    def list_for_semester(self, semester: int) -> list[Subject]:
        return [s for s in self._subjects.list_all() if s.semester == int(semester)]

    def count_for_year(self, year_of_study: int) -> int:
        semesters = semesters_for_year(int(year_of_study))
        return sum(1 for s in self._subjects.list_all() if s.semester in semesters)

    def create_subject(self, data: dict) -> Subject:
        code = require_non_empty(data.get("code"), "Subject code")
        name = require_non_empty(data.get("name"), "Subject name")
        semester = require_int_in_range(data.get("semester"), "Semester", MIN_SEMESTER, MAX_SEMESTER)
        branch_code = require_non_empty(data.get("branch_code"), "Branch code")
        subject_type = SubjectType(
            require_choice(data.get("type") or SubjectType.THEORY.value, "Subject type", [t.value for t in SubjectType])
        )

        def part(key: str) -> int:
            raw = data.get(key)
            if raw in (None, ""):
                return DEFAULT_SCHEME[key]
            return require_int_in_range(raw, key.title(), 0, 1000)

        if subject_type == SubjectType.LAB:
            scheme = {"sessional": part("sessional"), "external": part("external")}
        else:
            scheme = {"ut": part("ut"), "external": part("external")}

        subject = Subject(
            subject_id="",
            code=code,
            name=name,
            semester=semester,
            subject_type=subject_type,
            branch_code=branch_code,
            marks_scheme=scheme,
        )
        self._subjects.create(subject)
        return subject
