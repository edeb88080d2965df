from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class Student:
    """Domain entity: a student record owned by the backend."""

    student_id: str
    roll_number: str
    year_of_study: int
    branch_code: str
    gender: Gender
    phone_number: Optional[str] = None
    profile_id: Optional[str] = None
    full_name: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class StudentForm:
    """Validated payload for create/update."""

    roll_number: str
    year_of_study: int
    gender: Gender
    branch_code: str
    full_name: Optional[str] = None
    password: Optional[str] = None
    phone_number: Optional[str] = None

    def to_payload(self) -> dict:
        payload = {
            "roll_number": self.roll_number,
            "year_of_study": self.year_of_study,
            "gender": self.gender.value,
            "phone_number": self.phone_number or None,
            "branch_code": self.branch_code,
        }
        if self.full_name:
            payload["full_name"] = self.full_name
        if self.password:
            payload["password"] = self.password
        return payload
