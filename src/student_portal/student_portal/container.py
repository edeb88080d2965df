from __future__ import annotations

from dataclasses import dataclass

from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import FacultyAttendanceService, StudentAttendanceService
from .attendance.strategies.threshold_strategy import PeriodThresholdStrategy
from .backend.connection import ApiConfig, ApiConnection
from .core.constants import DEFAULT_ACADEMIC_YEAR
from .dashboard.http_stats_repository import HttpStatsRepository
from .dashboard.service import DashboardService
from .marks.http_mark_repository import HttpMarkRepository
from .marks.service import MarksService
from .students.http_student_repository import HttpStudentRepository
from .students.service import StudentService
from .subjects.http_subject_repository import HttpSubjectRepository
from .subjects.service import SubjectService
from .users.http_auth_repository import HttpAuthRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    students_repo: HttpStudentRepository
    attendance_repo: HttpAttendanceRepository
    subjects_repo: HttpSubjectRepository
    marks_repo: HttpMarkRepository
    auth_repo: HttpAuthRepository
    stats_repo: HttpStatsRepository

    auth_service: AuthService
    student_service: StudentService
    faculty_attendance_service: FacultyAttendanceService
    student_attendance_service: StudentAttendanceService
    subject_service: SubjectService
    marks_service: MarksService
    dashboard_service: DashboardService


def build_container(*, api_config: dict, academic_year: str = DEFAULT_ACADEMIC_YEAR, conn: ApiConnection | None = None) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", 10)),
    )
    conn = conn or ApiConnection.get_instance(config)

    students_repo = HttpStudentRepository(conn)
    attendance_repo = HttpAttendanceRepository(conn)
    subjects_repo = HttpSubjectRepository(conn)
    marks_repo = HttpMarkRepository(conn)
    auth_repo = HttpAuthRepository(conn)
    stats_repo = HttpStatsRepository(conn)

    auth_service = AuthService(auth_repo)
    student_service = StudentService(students_repo)
    faculty_attendance_service = FacultyAttendanceService(
        attendance_repo,
        students_repo,
        strategy=PeriodThresholdStrategy(),
    )
    student_attendance_service = StudentAttendanceService(attendance_repo)
    subject_service = SubjectService(subjects_repo)
    marks_service = MarksService(marks_repo, subjects_repo, academic_year=academic_year)
    dashboard_service = DashboardService(
        stats_repo,
        students_repo,
        student_attendance_service,
        marks_service,
        subject_service,
    )

    return Container(
        conn=conn,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        subjects_repo=subjects_repo,
        marks_repo=marks_repo,
        auth_repo=auth_repo,
        stats_repo=stats_repo,
        auth_service=auth_service,
        student_service=student_service,
        faculty_attendance_service=faculty_attendance_service,
        student_attendance_service=student_attendance_service,
        subject_service=subject_service,
        marks_service=marks_service,
        dashboard_service=dashboard_service,
    )
