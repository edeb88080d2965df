from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student, StudentForm


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): services depend on this interface, not on the HTTP backend.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_year(self, year_of_study: int) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_profile(self, profile_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, form: StudentForm) -> None:
        raise NotImplementedError

    def update(self, student_id: str, form: StudentForm) -> None:
        raise NotImplementedError

    def delete(self, student_id: str) -> None:
        raise NotImplementedError
