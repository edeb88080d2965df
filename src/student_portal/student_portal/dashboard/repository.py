from __future__ import annotations

from typing import Protocol

from .model import FacultyStats


class StatsRepository(Protocol):
    def get_for_year(self, year_of_study: int) -> FacultyStats:
        raise NotImplementedError
