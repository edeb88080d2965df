"""Student-side attendance aggregation.

Everything here reads the stored status label only; nothing recomputes a
status from period counts.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from ..common.percent import rounded_percentage
from ..core.constants import PART_ONE_LAST_DAY
from .model import AttendanceRecord, MonthlySummary


def attendance_percentage(present: int, total: int) -> int:
    """round(present / total * 100), halves rounded up; 0 when there is nothing to count."""
    return rounded_percentage(present, total)


def count_present(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status.counts_present)


def split_by_half(records: Sequence[AttendanceRecord]) -> tuple[list[AttendanceRecord], list[AttendanceRecord]]:
    part_one = [r for r in records if r.work_date.day <= PART_ONE_LAST_DAY]
    part_two = [r for r in records if r.work_date.day > PART_ONE_LAST_DAY]
    return part_one, part_two


def summarize_month(records: Sequence[AttendanceRecord]) -> MonthlySummary:
    total = len(records)
    present = count_present(records)
    part_one, part_two = split_by_half(records)
    return MonthlySummary(
        total_days=total,
        present_days=present,
        absent_days=total - present,
        percentage=attendance_percentage(present, total),
        part_one=part_one,
        part_two=part_two,
    )
