"""Display transform that merges a theory subject's exam rows.

Pure: the input list and its rows are never modified.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Union

from ..common.percent import round_one_decimal
from ..core.constants import DEFAULT_MARKS_TOTAL
from ..core.enums import SubjectType
from ..subjects.model import Subject
from .model import Mark

ALL = "all"
COMBINED_SUFFIX = " (Theory - Combined)"


def combine_marks(
    marks: Sequence[Mark],
    subjects: Sequence[Subject],
    *,
    subject_type: Optional[str] = ALL,
    student_id: Optional[str] = ALL,
) -> list[Mark]:
    """Merge theory rows sharing (student, subject) into one percentage-of-100 row.

    Nothing is merged when a single student is selected or when only labs are shown.
    """

    if (student_id and student_id != ALL) or subject_type == SubjectType.LAB.value:
        return list(marks)

    theory_ids = {s.subject_id for s in subjects if s.is_theory}

    # Each slot is either a pass-through row or the key of a theory group.
    slots: list[Union[Mark, tuple[str, str]]] = []
    groups: dict[tuple[str, str], list[Mark]] = {}
    for m in marks:
        if m.subject_id not in theory_ids:
            slots.append(m)
            continue
        key = (m.student_id, m.subject_id)
        if key not in groups:
            groups[key] = []
            slots.append(key)
        groups[key].append(m)

    out: list[Mark] = []
    for slot in slots:
        if isinstance(slot, Mark):
            out.append(slot)
            continue
        rows = groups[slot]
        if len(rows) == 1:
            out.append(rows[0])
            continue
        out.append(_merge(rows))
    return out


def _merge(rows: Sequence[Mark]) -> Mark:
    first = rows[0]
    obtained = sum(r.marks_obtained for r in rows)
    total = sum(r.total_marks for r in rows)
    percent = obtained / total * 100 if total else 0.0
    return replace(
        first,
        marks_obtained=round_one_decimal(percent),
        total_marks=DEFAULT_MARKS_TOTAL,
        subject_name=(first.subject_name or "") + COMBINED_SUFFIX,
        combined=True,
    )
