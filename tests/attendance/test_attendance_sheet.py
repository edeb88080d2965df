from datetime import date

import pytest

from student_portal.attendance.model import AttendanceRecord
from student_portal.attendance.sheet import AttendanceSheet
from student_portal.core.enums import DayStatus, Gender
from student_portal.core.exceptions import ValidationError
from student_portal.students.model import Student


def _student(sid: str, roll: str) -> Student:
    return Student(student_id=sid, roll_number=roll, year_of_study=1, branch_code="CS", gender=Gender.MALE)


ROSTER = [_student("s1", "CS001"), _student("s2", "CS002"), _student("s3", "CS003")]
DAY = date(2026, 3, 10)


def _record(sid: str, present: int) -> AttendanceRecord:
    return AttendanceRecord(student_id=sid, work_date=DAY, periods_present=present, status=DayStatus.ABSENT)


def test_new_sheet_starts_all_absent():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)

    for s in ROSTER:
        assert sheet.periods(s.student_id) == (False,) * 7
        assert sheet.decision(s.student_id).status == DayStatus.ABSENT


def test_toggle_changes_only_one_cell():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)

    sheet.toggle("s2", 3)

    assert sheet.periods("s2") == (False, False, True, False, False, False, False)
    assert sheet.periods("s1") == (False,) * 7
    assert sheet.periods("s3") == (False,) * 7

    sheet.toggle("s2", 3)
    assert sheet.periods("s2") == (False,) * 7


def test_status_is_recomputed_after_each_edit():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)

    for p in range(1, 5):
        sheet.set_period("s1", p, True)
    assert sheet.decision("s1").status == DayStatus.HALF

    sheet.set_period("s1", 5, True)
    assert sheet.decision("s1").status == DayStatus.FULL

    sheet.toggle("s1", 1)
    sheet.toggle("s1", 2)
    assert sheet.decision("s1").status == DayStatus.ABSENT


def test_mark_all_present_then_absent_discards_prior_toggles():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)
    sheet.toggle("s1", 1)
    sheet.toggle("s3", 7)

    sheet.mark_all(True)
    assert all(sheet.periods(s.student_id) == (True,) * 7 for s in ROSTER)

    sheet.mark_all(False)
    assert all(sheet.periods(s.student_id) == (False,) * 7 for s in ROSTER)


def test_from_records_seeds_counts_and_ignores_other_students():
    sheet = AttendanceSheet.from_records(
        roster=ROSTER,
        work_date=DAY,
        records=[_record("s1", 5), _record("s3", 4), _record("other-year", 7)],
    )

    assert sheet.periods("s1") == (True, True, True, True, True, False, False)
    assert sheet.periods_present("s3") == 4
    assert sheet.periods("s2") == (False,) * 7
    assert [s.student_id for s in sheet.roster] == ["s1", "s2", "s3"]


def test_from_form_reads_checkbox_fields():
    form = {
        AttendanceSheet.field_name("s1", 1): "on",
        AttendanceSheet.field_name("s1", 2): "on",
        AttendanceSheet.field_name("s2", 7): "on",
        "p-unknown-1": "on",
    }

    sheet = AttendanceSheet.from_form(roster=ROSTER, work_date=DAY, form=form)

    assert sheet.periods_present("s1") == 2
    assert sheet.is_marked("s2", 7)
    assert sheet.periods_present("s3") == 0


def test_to_records_sends_one_record_per_roster_member():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)
    sheet.mark_all(True)
    sheet.toggle("s2", 1)
    sheet.toggle("s2", 2)
    sheet.toggle("s2", 3)

    records = sheet.to_records(marked_by="fac-1")

    assert [r.student_id for r in records] == ["s1", "s2", "s3"]
    assert [r.status for r in records] == [DayStatus.FULL, DayStatus.HALF, DayStatus.FULL]
    assert records[1].periods_present == 4
    assert all(r.total_periods == 7 and r.marked_by == "fac-1" for r in records)
    assert records[0].to_payload() == {
        "student_id": "s1",
        "date": "2026-03-10",
        "month": 3,
        "year": 2026,
        "periods_present": 7,
        "total_periods": 7,
        "status": "Present",
        "marked_by": "fac-1",
    }


def test_summary_counts_each_status():
    sheet = AttendanceSheet.from_records(
        roster=ROSTER, work_date=DAY, records=[_record("s1", 7), _record("s2", 4)]
    )

    summary = sheet.summary()

    assert (summary.full, summary.half, summary.absent) == (1, 1, 1)
    assert summary.total == 3


def test_unknown_student_or_period_is_rejected():
    sheet = AttendanceSheet(roster=ROSTER, work_date=DAY)

    with pytest.raises(ValidationError):
        sheet.toggle("nobody", 1)
    with pytest.raises(ValidationError):
        sheet.toggle("s1", 0)
    with pytest.raises(ValidationError):
        sheet.toggle("s1", 8)
