from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_BRANCH_CODE, YEARS_OF_STUDY
from ..core.enums import Gender
from ..core.exceptions import ApiError, ValidationError
from ..users.guards import faculty_required

logger = logging.getLogger(__name__)


def _selected_year() -> int:
    try:
        year = int(request.values.get("year", 1))
    except ValueError:
        return 1
    return year if year in YEARS_OF_STUDY else 1


def register(app: Flask, container: Container) -> None:
    def _render_form(*, user, year: int, form: dict, student=None):
        return render_template(
            "faculty/student_form.html",
            current_user=user,
            year=year,
            form=form,
            student=student,
            genders=[g.value for g in Gender],
            years=YEARS_OF_STUDY,
            active_page="faculty_students",
        )

    @app.route("/faculty/students", endpoint="faculty_students")
    @faculty_required
    def faculty_students(user):
        year = _selected_year()
        query = request.args.get("q", "")
        students = []
        try:
            students = container.student_service.list_for_year(year, query=query)
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to list students")
            flash("Failed to fetch students", "danger")

        return render_template(
            "faculty/students.html",
            current_user=user,
            students=students,
            year=year,
            years=YEARS_OF_STUDY,
            query=query,
            active_page="faculty_students",
        )

    @app.route("/faculty/students/add", methods=["GET", "POST"], endpoint="add_student")
    @faculty_required
    def add_student(user):
        year = _selected_year()
        if request.method == "POST":
            try:
                form = container.student_service.create_student(request.form.to_dict())
                flash("Student added successfully", "success")
                return redirect(url_for("faculty_students", year=form.year_of_study))
            except (ValidationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Failed to add student")
                flash("Failed to save student", "danger")
            return _render_form(user=user, year=year, form=request.form.to_dict())

        return _render_form(
            user=user,
            year=year,
            form={"year_of_study": year, "gender": Gender.MALE.value, "branch_code": DEFAULT_BRANCH_CODE},
        )

    @app.route("/faculty/students/<student_id>/edit", methods=["GET", "POST"], endpoint="edit_student")
    @faculty_required
    def edit_student(student_id: str, user):
        year = _selected_year()
        try:
            student = container.student_service.find_by_id(year, student_id)
        except ApiError as e:
            flash(str(e), "danger")
            return redirect(url_for("faculty_students", year=year))
        if student is None:
            flash("Student does not exist", "warning")
            return redirect(url_for("faculty_students", year=year))

        if request.method == "POST":
            try:
                form = container.student_service.update_student(student_id, request.form.to_dict())
                flash("Student updated successfully", "success")
                return redirect(url_for("faculty_students", year=form.year_of_study))
            except (ValidationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Failed to update student %s", student_id)
                flash("Failed to save student", "danger")
            return _render_form(user=user, year=year, form=request.form.to_dict(), student=student)

        return _render_form(
            user=user,
            year=year,
            student=student,
            form={
                "roll_number": student.roll_number,
                "full_name": "",
                "password": "",
                "year_of_study": student.year_of_study,
                "gender": student.gender.value,
                "phone_number": student.phone_number or "",
                "branch_code": student.branch_code,
            },
        )

    @app.route("/faculty/students/<student_id>/delete", methods=["POST"], endpoint="delete_student")
    @faculty_required
    def delete_student(student_id: str, user):
        try:
            container.student_service.delete_student(student_id)
            flash("Student deleted successfully", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to delete student %s", student_id)
            flash("Failed to delete student", "danger")
        return redirect(url_for("faculty_students", year=_selected_year()))
