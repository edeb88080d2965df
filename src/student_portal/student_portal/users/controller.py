from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ApiError, AuthenticationError, ValidationError
from .guards import current_user
from .session import SessionStore

logger = logging.getLogger(__name__)


def _home_for(role: Role) -> str:
    if role == Role.FACULTY:
        return url_for("faculty_dashboard")
    if role == Role.STUDENT:
        return url_for("student_dashboard")
    return url_for("index")


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html", current_user=current_user())

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        login_type = request.values.get("type", Role.FACULTY.value)
        if login_type not in (Role.FACULTY.value, Role.STUDENT.value):
            login_type = Role.FACULTY.value

        user = current_user()
        if user and user.role.value == login_type:
            return redirect(_home_for(user.role))

        if request.method == "POST":
            try:
                s_user = container.auth_service.sign_in(
                    password=request.form.get("password", ""),
                    email=request.form.get("email"),
                    roll_number=request.form.get("roll_number"),
                    role=login_type,
                )
                SessionStore(session).establish(s_user)
                session.permanent = True
                flash("Signed in successfully", "success")
                return redirect(_home_for(s_user.role))
            except (ValidationError, AuthenticationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Sign in failed")
                flash("System error while signing in", "danger")

        return render_template("login.html", login_type=login_type, form=request.form)

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if request.method == "POST":
            try:
                s_user = container.auth_service.sign_up(
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                    full_name=request.form.get("full_name", ""),
                    role=request.form.get("role", Role.FACULTY.value),
                )
                SessionStore(session).establish(s_user)
                session.permanent = True
                flash("Account created successfully", "success")
                return redirect(_home_for(s_user.role))
            except (ValidationError, AuthenticationError, ApiError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Sign up failed")
                flash("System error while creating the account", "danger")

        return render_template("signup.html", form=request.form)

    @app.route("/logout", endpoint="logout")
    def logout():
        SessionStore(session).clear()
        flash("Logged out", "info")
        return redirect(url_for("index"))
