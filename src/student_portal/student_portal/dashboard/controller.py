from __future__ import annotations

import logging

from flask import Flask, flash, render_template, request

from ..container import Container
from ..core.constants import YEARS_OF_STUDY
from ..core.exceptions import ApiError, ValidationError
from ..users.guards import faculty_required, student_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/faculty", endpoint="faculty_dashboard")
    @faculty_required
    def faculty_dashboard(user):
        try:
            year = int(request.args.get("year", 1))
        except ValueError:
            year = 1

        dashboard = None
        try:
            dashboard = container.dashboard_service.faculty(year)
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load faculty dashboard")
            flash("Failed to fetch stats", "danger")

        return render_template(
            "faculty/dashboard.html",
            current_user=user,
            dashboard=dashboard,
            year=year,
            years=YEARS_OF_STUDY,
            active_page="faculty_dashboard",
        )

    @app.route("/student", endpoint="student_dashboard")
    @student_required
    def student_dashboard(user):
        dashboard = None
        try:
            dashboard = container.dashboard_service.student(user)
        except ApiError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to load student dashboard")
            flash("Failed to fetch your data", "danger")

        return render_template(
            "student/dashboard.html",
            current_user=user,
            dashboard=dashboard,
            active_page="student_dashboard",
        )
