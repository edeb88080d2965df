from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when sign-in or sign-up is refused."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ApiError(DomainError):
    """Base exception for failures talking to the records backend."""


class TransportError(ApiError):
    """Raised when the HTTP request itself failed (connection, timeout)."""


class ApiResponseError(ApiError):
    """Raised when the backend answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, payload: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
