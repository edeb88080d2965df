from __future__ import annotations

from ..backend.connection import ApiConnection
from ..backend.http_base import fetch_json
from ..core.enums import Role
from ..core.exceptions import ApiResponseError, AuthenticationError
from .model import AuthUser, Credentials
from .repository import AuthRepository


def _user_from(data, default_message: str) -> AuthUser:
    user = data.get("user") if isinstance(data, dict) else None
    if not user:
        raise AuthenticationError(default_message)
    try:
        return AuthUser.from_api(user)
    except ValueError:
        raise AuthenticationError(default_message)


class HttpAuthRepository(AuthRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def sign_in(self, credentials: Credentials) -> AuthUser:
        try:
            data = fetch_json(
                self._conn,
                "POST",
                "/api/auth/signin",
                json=credentials.to_payload(),
                error_message="Sign in failed",
            )
        except ApiResponseError as e:
            raise AuthenticationError(str(e)) from e
        return _user_from(data, "Sign in failed")

    def sign_up(self, *, email: str, password: str, full_name: str, role: Role) -> AuthUser:
        try:
            data = fetch_json(
                self._conn,
                "POST",
                "/api/auth/signup",
                json={"email": email, "password": password, "full_name": full_name, "role": role.value},
                error_message="Sign up failed",
            )
        except ApiResponseError as e:
            raise AuthenticationError(str(e)) from e
        return _user_from(data, "Sign up failed")
