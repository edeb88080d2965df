from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for page access."""

    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"


class DayStatus(str, Enum):
    """Day-level attendance status, stored by its display label."""

    ABSENT = "Absent"
    HALF = "Half Day"
    FULL = "Present"

    @property
    def counts_present(self) -> bool:
        return self in (DayStatus.HALF, DayStatus.FULL)

    @classmethod
    def from_label(cls, label: str | None) -> "DayStatus":
        """Map a stored label to a status; unknown or missing labels read as absent."""
        try:
            return cls(label)
        except ValueError:
            return cls.ABSENT


class SubjectType(str, Enum):
    THEORY = "theory"
    LAB = "lab"
    PROJECT = "project"


class ExamType(str, Enum):
    UNIT_TEST_INTERNAL = "unit_test_internal"
    UNIT_TEST_EXTERNAL = "unit_test_external"
    LAB_INTERNAL = "lab_internal"
    LAB_EXTERNAL = "lab_external"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
