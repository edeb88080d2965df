from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.academics import default_semester, semesters_for_year
from ..container import Container
from ..core.constants import DEFAULT_MARKS_TOTAL, MAX_SEMESTER, MIN_SEMESTER
from ..core.enums import ExamType, SubjectType
from ..core.exceptions import ApiError, ValidationError
from ..users.guards import faculty_required, student_required
from .combiner import ALL
from .service import SUBJECT_TYPE_FILTERS

logger = logging.getLogger(__name__)


def _int_arg(name: str, default: int) -> int:
    try:
        return int(request.values.get(name, default))
    except ValueError:
        return default


def register(app: Flask, container: Container) -> None:
    def _filters() -> dict:
        semester = _int_arg("semester", MIN_SEMESTER)
        if semester < MIN_SEMESTER or semester > MAX_SEMESTER:
            semester = MIN_SEMESTER
        subject_type = request.values.get("subject_type", ALL)
        if subject_type not in SUBJECT_TYPE_FILTERS:
            subject_type = ALL
        return {
            "semester": semester,
            "subject_type": subject_type,
            "student": request.values.get("student", ALL) or ALL,
        }

    @app.route("/faculty/marks", endpoint="faculty_marks")
    @faculty_required
    def faculty_marks(user):
        filters = _filters()
        rows, students, subjects = [], [], []
        try:
            subjects = container.subject_service.list_for_semester(filters["semester"])
            students = container.student_service.list_for_semester(filters["semester"])
            rows = container.marks_service.faculty_view(
                semester=filters["semester"],
                subject_type=filters["subject_type"],
                student_id=filters["student"],
            )
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load marks")
            flash("Failed to fetch data", "danger")

        return render_template(
            "faculty/marks.html",
            current_user=user,
            rows=rows,
            students=students,
            subjects=subjects,
            filters=filters,
            subject_type_filters=SUBJECT_TYPE_FILTERS,
            subject_types=[t.value for t in SubjectType],
            exam_types=list(ExamType),
            semesters=range(MIN_SEMESTER, MAX_SEMESTER + 1),
            default_total=DEFAULT_MARKS_TOTAL,
            academic_year=app.config.get("ACADEMIC_YEAR"),
            active_page="faculty_marks",
        )

    @app.route("/faculty/marks/add", methods=["POST"], endpoint="add_mark")
    @faculty_required
    def add_mark(user):
        filters = _filters()
        try:
            container.marks_service.add_mark(request.form.to_dict(), semester=filters["semester"], entered_by=user.user_id)
            flash("Marks saved successfully", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to save marks")
            flash("Failed to save marks", "danger")
        return redirect(url_for("faculty_marks", **filters))

    @app.route("/faculty/marks/<mark_id>/delete", methods=["POST"], endpoint="delete_mark")
    @faculty_required
    def delete_mark(mark_id: str, user):
        filters = _filters()
        try:
            container.marks_service.delete_mark(mark_id)
            flash("Marks deleted successfully", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to delete marks %s", mark_id)
            flash("Failed to delete marks", "danger")
        return redirect(url_for("faculty_marks", **filters))

    @app.route("/student/marks", endpoint="student_marks")
    @student_required
    def student_marks(user):
        student, report, semesters = None, None, ()
        try:
            student = container.student_service.get_for_profile(user.user_id)
            if student:
                semesters = semesters_for_year(student.year_of_study)
                semester = _int_arg("semester", default_semester(student.year_of_study))
                report = container.marks_service.student_report(student_id=student.student_id, semester=semester)
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load marks for %s", user.user_id)
            flash("Failed to fetch marks", "danger")

        return render_template(
            "student/marks.html",
            current_user=user,
            student=student,
            report=report,
            semesters=semesters,
            active_page="student_marks",
        )
