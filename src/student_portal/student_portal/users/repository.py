from __future__ import annotations

from typing import Protocol

from ..core.enums import Role
from .model import AuthUser, Credentials


class AuthRepository(Protocol):
    """Auth interface of the records backend."""

    def sign_in(self, credentials: Credentials) -> AuthUser:
        raise NotImplementedError

    def sign_up(self, *, email: str, password: str, full_name: str, role: Role) -> AuthUser:
        raise NotImplementedError
