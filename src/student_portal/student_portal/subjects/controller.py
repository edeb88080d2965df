from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..core.exceptions import ApiError, ValidationError
from ..users.guards import faculty_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/faculty/subjects/add", methods=["POST"], endpoint="add_subject")
    @faculty_required
    def add_subject(user):
        semester = request.form.get("semester", "1")
        try:
            subject = container.subject_service.create_subject(request.form.to_dict())
            semester = subject.semester
            flash("Subject created", "success")
        except (ValidationError, ApiError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Failed to create subject")
            flash("Failed to create subject", "danger")
        return redirect(url_for("faculty_marks", semester=semester))
