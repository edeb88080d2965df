from __future__ import annotations

import csv
import io
import logging
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date, shift_day, today_local
from ..container import Container
from ..core.constants import PART_ONE_LAST_DAY, YEARS_OF_STUDY
from ..core.exceptions import ApiError, ValidationError
from ..users.guards import faculty_required, student_required

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def register(app: Flask, container: Container) -> None:
    def _selected_year() -> int:
        try:
            year = int(request.values.get("year", 1))
        except ValueError:
            return 1
        return year if year in YEARS_OF_STUDY else 1

    def _selected_date() -> date:
        today = today_local()
        raw = request.values.get("date")
        if not raw:
            return today
        try:
            selected = parse_iso_date(raw)
        except ValueError:
            flash("Invalid date, showing today instead", "warning")
            return today
        return shift_day(selected, request.values.get("nav", ""), today=today)

    def _render_sheet(*, user, sheet, year: int):
        return render_template(
            "faculty/attendance.html",
            current_user=user,
            sheet=sheet,
            summary=sheet.summary() if sheet else None,
            year=year,
            years=YEARS_OF_STUDY,
            selected_date=sheet.work_date if sheet else today_local(),
            is_today=(sheet.work_date >= today_local()) if sheet else True,
            part_label=(
                f"Part 1 (1-{PART_ONE_LAST_DAY})"
                if sheet and sheet.work_date.day <= PART_ONE_LAST_DAY
                else f"Part 2 ({PART_ONE_LAST_DAY + 1}-30/31)"
            ),
            active_page="faculty_attendance",
        )

    @app.route("/faculty/attendance", methods=["GET"], endpoint="faculty_attendance")
    @faculty_required
    def faculty_attendance(user):
        year = _selected_year()
        selected = _selected_date()
        sheet = None
        try:
            sheet = container.faculty_attendance_service.load_sheet(year_of_study=year, work_date=selected)
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("faculty_attendance", year=year))
        except ApiError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load attendance sheet")
            flash("Failed to fetch data", "danger")

        return _render_sheet(user=user, sheet=sheet, year=year)

    @app.route("/faculty/attendance", methods=["POST"], endpoint="submit_attendance")
    @faculty_required
    def submit_attendance(user):
        year = _selected_year()
        action = request.form.get("action", "save")
        try:
            work_date = parse_iso_date(request.form.get("date", ""))
            sheet = container.faculty_attendance_service.sheet_from_form(
                year_of_study=year,
                work_date=work_date,
                form=request.form,
                action=action,
            )
        except (ValidationError, ValueError) as e:
            flash(str(e), "warning")
            return redirect(url_for("faculty_attendance", year=year))
        except ApiError as e:
            flash(str(e), "danger")
            return redirect(url_for("faculty_attendance", year=year))

        if action != "save":
            return _render_sheet(user=user, sheet=sheet, year=year)

        try:
            container.faculty_attendance_service.save_sheet(sheet, marked_by=user.user_id)
            flash("Attendance saved successfully", "success")
            return redirect(url_for("faculty_attendance", year=year, date=sheet.work_date.isoformat()))
        except (ValidationError, ApiError) as e:
            flash(f"Failed to save attendance: {e}", "danger")
        except Exception:
            logger.exception("Failed to save attendance")
            flash("Failed to save attendance", "danger")

        # The submitted matrix is shown again so nothing has to be re-entered.
        return _render_sheet(user=user, sheet=sheet, year=year)

    def _selected_month_year() -> tuple[int, int]:
        today = today_local()
        try:
            month = int(request.args.get("month", today.month))
            year = int(request.args.get("year", today.year))
        except ValueError:
            return today.month, today.year
        return month, year

    @app.route("/student/attendance", endpoint="student_attendance")
    @student_required
    def student_attendance(user):
        month, year = _selected_month_year()
        summary = None
        student = None
        try:
            student = container.student_service.get_for_profile(user.user_id)
            if student:
                summary = container.student_attendance_service.monthly_summary(
                    student_id=student.student_id, month=month, year=year
                )
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load attendance for %s", user.user_id)
            flash("Failed to fetch attendance", "danger")

        return render_template(
            "student/attendance.html",
            current_user=user,
            student=student,
            summary=summary,
            month=month,
            year=year,
            month_names=MONTH_NAMES,
            active_page="student_attendance",
        )

    @app.route("/student/attendance/export", endpoint="export_student_attendance")
    @student_required
    def export_student_attendance(user):
        month, year = _selected_month_year()
        try:
            student = container.student_service.get_for_profile(user.user_id)
            if not student:
                flash("Your account is not linked to a student record", "warning")
                return redirect(url_for("student_attendance"))
            rows = container.student_attendance_service.export_rows(
                student_id=student.student_id, month=month, year=year
            )
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
            return redirect(url_for("student_attendance", month=month, year=year))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "part", "status", "periods_present", "total_periods"])
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_{student.roll_number}_{year}-{month:02d}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
