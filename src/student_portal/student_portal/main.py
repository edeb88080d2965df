from __future__ import annotations

import importlib
import logging
from datetime import timedelta

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .backend.connection import ApiConnection
from .container import build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .marks.controller import register as register_marks
from .students.controller import register as register_students
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users


def create_app(*, conn: ApiConnection | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ACADEMIC_YEAR"] = getattr(settings, "ACADEMIC_YEAR", "2025-26")
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).info(
        "settings=%s backend=%s", settings_module, api_config.get("base_url")
    )

    container = build_container(api_config=api_config, academic_year=app.config["ACADEMIC_YEAR"], conn=conn)

    register_users(app, container)
    register_dashboard(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_subjects(app, container)
    register_marks(app, container)

    return app
