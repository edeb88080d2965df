from __future__ import annotations

import logging

from ..attendance.service import StudentAttendanceService
from ..common.validators import require_int_in_range
from ..core.constants import RECENT_STUDENTS_LIMIT, YEARS_OF_STUDY
from ..core.exceptions import ApiError
from ..marks.service import MarksService, average_percentage
from ..students.repository import StudentRepository
from ..subjects.service import SubjectService
from ..users.model import AuthUser
from .model import FacultyDashboard, StudentDashboard
from .repository import StatsRepository

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(
        self,
        stats: StatsRepository,
        students: StudentRepository,
        attendance: StudentAttendanceService,
        marks: MarksService,
        subjects: SubjectService,
    ):
        self._stats = stats
        self._students = students
        self._attendance = attendance
        self._marks = marks
        self._subjects = subjects

    def faculty(self, year_of_study) -> FacultyDashboard:
        year = require_int_in_range(year_of_study, "Year of study", min(YEARS_OF_STUDY), max(YEARS_OF_STUDY))
        stats = self._stats.get_for_year(year)

        # Recent students are decoration; the stats alone still make a dashboard.
        try:
            recent = list(self._students.list_by_year(year))[:RECENT_STUDENTS_LIMIT]
        except ApiError as e:
            logger.warning("Failed to fetch recent students: %s", e)
            recent = []

        return FacultyDashboard(year_of_study=year, stats=stats, recent_students=recent)

    def student(self, user: AuthUser) -> StudentDashboard:
        student = self._students.get_by_profile(user.user_id)
        if student is None:
            return StudentDashboard(student=None)

        marks = self._marks.list_for_student(student.student_id)
        return StudentDashboard(
            student=student,
            attendance_percentage=self._attendance.overall_percentage(student.student_id),
            total_subjects=self._subjects.count_for_year(student.year_of_study),
            avg_marks=average_percentage(marks),
            total_exams=len(marks),
        )
