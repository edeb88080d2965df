from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Mark, MarkForm


class MarkRepository(Protocol):
    def list_marks(self, *, semester: Optional[int] = None, student_id: Optional[str] = None) -> Sequence[Mark]:
        raise NotImplementedError

    def create(self, form: MarkForm) -> None:
        raise NotImplementedError

    def delete(self, mark_id: str) -> None:
        raise NotImplementedError
