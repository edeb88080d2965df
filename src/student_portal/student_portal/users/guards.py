from __future__ import annotations

from functools import wraps

from flask import flash, redirect, session, url_for

from ..core.enums import Role
from .session import SessionStore


def current_user():
    return SessionStore(session).load()


def role_required(role: Role):
    """Only let `role` through; the signed-in user is handed to the view as `user`."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None or user.role != role:
                flash("Please sign in to continue", "warning")
                return redirect(url_for("login", type=role.value))
            return view(*args, user=user, **kwargs)

        return wrapper

    return decorator


faculty_required = role_required(Role.FACULTY)
student_required = role_required(Role.STUDENT)
