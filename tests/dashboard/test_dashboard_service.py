from datetime import date

import pytest

from student_portal.attendance.model import AttendanceRecord
from student_portal.attendance.service import StudentAttendanceService
from student_portal.core.enums import DayStatus, ExamType, Gender, Role, SubjectType
from student_portal.core.exceptions import TransportError, ValidationError
from student_portal.dashboard.model import FacultyStats
from student_portal.dashboard.service import DashboardService
from student_portal.marks.model import Mark
from student_portal.marks.service import MarksService
from student_portal.students.model import Student
from student_portal.subjects.model import Subject
from student_portal.subjects.service import SubjectService
from student_portal.users.model import AuthUser

STATS = FacultyStats(total_students=40, attendance_today=31, avg_attendance=82, total_subjects=6)
STUDENT = Student(
    student_id="s1", roll_number="CS001", year_of_study=2, branch_code="CS", gender=Gender.FEMALE, profile_id="u-1"
)
USER = AuthUser(user_id="u-1", email="s@college.edu", full_name="Asha", role=Role.STUDENT)


class Stats:
    def __init__(self):
        self.years = []

    def get_for_year(self, year_of_study):
        self.years.append(year_of_study)
        return STATS


class Students:
    def __init__(self, students=(), error=None):
        self.students = list(students)
        self.error = error

    def list_by_year(self, year_of_study):
        if self.error:
            raise self.error
        return [s for s in self.students if s.year_of_study == year_of_study]

    def get_by_profile(self, profile_id):
        return next((s for s in self.students if s.profile_id == profile_id), None)


class Attendance:
    def list_for_student(self, student_id, *, month=None, year=None):
        return [
            AttendanceRecord(student_id=student_id, work_date=date(2026, 1, d), periods_present=p, status=s)
            for d, p, s in ((5, 7, DayStatus.FULL), (6, 4, DayStatus.HALF), (7, 0, DayStatus.ABSENT))
        ]


class Marks:
    def list_marks(self, *, semester=None, student_id=None):
        return [
            Mark(mark_id="m1", student_id="s1", subject_id="x", semester=3, exam_type=ExamType.UNIT_TEST_INTERNAL, marks_obtained=18, total_marks=20),
            Mark(mark_id="m2", student_id="s1", subject_id="y", semester=4, exam_type=ExamType.LAB_INTERNAL, marks_obtained=30, total_marks=40),
        ]


class Subjects:
    def list_all(self):
        return [
            Subject(subject_id=str(n), code=str(n), name=str(n), semester=n, subject_type=SubjectType.THEORY)
            for n in (1, 3, 3, 4, 5)
        ]


def _service(students):
    subjects = Subjects()
    return DashboardService(
        Stats(),
        students,
        StudentAttendanceService(Attendance()),
        MarksService(Marks(), subjects),
        SubjectService(subjects),
    )


def test_faculty_dashboard_limits_recent_students():
    roster = [
        Student(student_id=str(i), roll_number=f"CS{i:03d}", year_of_study=1, branch_code="CS", gender=Gender.MALE)
        for i in range(8)
    ]

    dashboard = _service(Students(roster)).faculty("1")

    assert dashboard.stats == STATS
    assert len(dashboard.recent_students) == 5


def test_faculty_dashboard_survives_roster_failure():
    dashboard = _service(Students(error=TransportError("down"))).faculty(2)

    assert dashboard.stats == STATS
    assert dashboard.recent_students == []


def test_faculty_dashboard_rejects_unknown_year():
    with pytest.raises(ValidationError):
        _service(Students()).faculty(5)


def test_student_dashboard_aggregates_linked_record():
    dashboard = _service(Students([STUDENT])).student(USER)

    assert dashboard.linked
    assert dashboard.attendance_percentage == 67
    assert dashboard.total_subjects == 3
    assert dashboard.avg_marks == 83
    assert dashboard.total_exams == 2


def test_unlinked_student_dashboard():
    dashboard = _service(Students()).student(USER)

    assert not dashboard.linked
    assert dashboard.attendance_percentage == 0
