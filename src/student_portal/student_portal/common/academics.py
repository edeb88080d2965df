from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_SEMESTER, MIN_SEMESTER, SEMESTERS_PER_YEAR, YEARS_OF_STUDY


def semesters_for_year(year_of_study: int) -> tuple[int, ...]:
    """Year 1 -> (1, 2), Year 2 -> (3, 4), Year 3 -> (5, 6); unknown years map to nothing."""
    if year_of_study not in YEARS_OF_STUDY:
        return ()
    first = (year_of_study - 1) * SEMESTERS_PER_YEAR + 1
    return tuple(range(first, first + SEMESTERS_PER_YEAR))


def year_for_semester(semester: int) -> Optional[int]:
    if semester < MIN_SEMESTER or semester > MAX_SEMESTER:
        return None
    return (semester - 1) // SEMESTERS_PER_YEAR + 1


def default_semester(year_of_study: int) -> int:
    semesters = semesters_for_year(year_of_study)
    return semesters[0] if semesters else MIN_SEMESTER
