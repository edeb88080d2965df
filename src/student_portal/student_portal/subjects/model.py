from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import SubjectType


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject taught in one semester.

    `marks_scheme` is {"ut", "external"} for theory/project and
    {"sessional", "external"} for labs.
    """

    subject_id: str
    code: str
    name: str
    semester: int
    subject_type: Optional[SubjectType]
    branch_code: str = ""
    marks_scheme: dict = field(default_factory=dict)

    @property
    def is_theory(self) -> bool:
        return self.subject_type == SubjectType.THEORY

    def to_payload(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "semester": self.semester,
            "branch_code": self.branch_code,
            "type": self.subject_type.value if self.subject_type else None,
            "marks": dict(self.marks_scheme),
        }
