from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class AuthUser:
    """Domain entity: the signed-in account.

    Note: this is the snapshot kept in the session; it carries no credentials.
    """

    user_id: str
    email: str
    full_name: str
    role: Role

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "AuthUser":
        return cls(
            user_id=str(data.get("id") or data.get("_id") or ""),
            email=str(data.get("email") or ""),
            full_name=str(data.get("full_name") or ""),
            role=Role(data.get("role")),
        )

    def to_snapshot(self) -> dict:
        snapshot = asdict(self)
        snapshot["role"] = self.role.value
        return snapshot

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> "AuthUser":
        return cls(
            user_id=str(data["user_id"]),
            email=str(data["email"]),
            full_name=str(data["full_name"]),
            role=Role(data["role"]),
        )


@dataclass(frozen=True)
class Credentials:
    password: str
    email: Optional[str] = None
    roll_number: Optional[str] = None

    def to_payload(self) -> dict:
        if self.roll_number:
            return {"role": Role.STUDENT.value, "roll_number": self.roll_number, "password": self.password}
        return {"email": self.email, "password": self.password}
