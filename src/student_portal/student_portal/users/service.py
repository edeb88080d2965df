from __future__ import annotations

from typing import Optional

from ..common.validators import require_choice, require_email, require_min_length, require_non_empty
from ..core.constants import MIN_FULL_NAME_LENGTH, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import AuthUser, Credentials
from .repository import AuthRepository

SIGNUP_ROLES = (Role.STUDENT.value, Role.FACULTY.value)


class AuthService:
    """Use case: authenticate (sign in / sign up) against the backend."""

    def __init__(self, auth: AuthRepository):
        self._auth = auth

    def sign_in(
        self,
        *,
        password: str,
        email: Optional[str] = None,
        roll_number: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AuthUser:
        """Students sign in with their roll number, everyone else with an email."""

        if role == Role.STUDENT.value:
            roll_number = require_non_empty(roll_number, "Roll number")
            require_non_empty(password, "Password")
            credentials = Credentials(password=password, roll_number=roll_number)
        else:
            email = require_email(email)
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
            credentials = Credentials(password=password, email=email)

        return self._auth.sign_in(credentials)

    def sign_up(self, *, email: str, password: str, full_name: str, role: str) -> AuthUser:
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        full_name = (full_name or "").strip()
        if len(full_name) < MIN_FULL_NAME_LENGTH:
            raise ValidationError(f"Full name must be at least {MIN_FULL_NAME_LENGTH} characters")
        role = require_choice(role, "Role", SIGNUP_ROLES)

        return self._auth.sign_up(email=email, password=password, full_name=full_name, role=Role(role))
