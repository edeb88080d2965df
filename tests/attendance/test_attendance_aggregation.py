from datetime import date

import pytest

from student_portal.attendance.aggregation import (
    attendance_percentage,
    count_present,
    split_by_half,
    summarize_month,
)
from student_portal.attendance.model import AttendanceRecord
from student_portal.core.enums import DayStatus


def _day(day: int, status: DayStatus, month: int = 1) -> AttendanceRecord:
    return AttendanceRecord(
        student_id="s1",
        work_date=date(2026, month, day),
        periods_present=7 if status == DayStatus.FULL else 0,
        status=status,
    )


def test_percentage_is_zero_without_days():
    assert attendance_percentage(0, 0) == 0


@pytest.mark.parametrize(
    "present,total,expected",
    [(1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 8, 38), (10, 10, 100), (0, 5, 0)],
)
def test_percentage_rounds_half_up(present, total, expected):
    assert attendance_percentage(present, total) == expected


def test_percentage_never_decreases_as_present_grows():
    for total in range(1, 32):
        values = [attendance_percentage(p, total) for p in range(total + 1)]
        assert values == sorted(values)


def test_split_keeps_order_within_each_half():
    records = [_day(3, DayStatus.FULL), _day(15, DayStatus.ABSENT), _day(16, DayStatus.HALF), _day(31, DayStatus.FULL)]

    part_one, part_two = split_by_half(records)

    assert [r.work_date.day for r in part_one] == [3, 15]
    assert [r.work_date.day for r in part_two] == [16, 31]


def test_split_preserves_input_order_not_date_order():
    records = [_day(20, DayStatus.FULL), _day(2, DayStatus.FULL), _day(17, DayStatus.FULL), _day(1, DayStatus.FULL)]

    part_one, part_two = split_by_half(records)

    assert [r.work_date.day for r in part_one] == [2, 1]
    assert [r.work_date.day for r in part_two] == [20, 17]


def test_half_days_count_as_present():
    records = [_day(1, DayStatus.FULL), _day(2, DayStatus.HALF), _day(3, DayStatus.ABSENT), _day(4, DayStatus.ABSENT)]

    assert count_present(records) == 2

    summary = summarize_month(records)
    assert summary.total_days == 4
    assert summary.present_days == 2
    assert summary.absent_days == 2
    assert summary.percentage == 50
    assert len(summary.part_one) == 4
    assert summary.part_two == []


def test_empty_month_summary():
    summary = summarize_month([])

    assert (summary.total_days, summary.present_days, summary.absent_days, summary.percentage) == (0, 0, 0, 0)
