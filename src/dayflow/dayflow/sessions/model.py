from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SessionPointer:
    """Stored reference to the signed-in account. The token carries no meaning."""

    account_id: str
    token: str

    def to_record(self) -> Dict[str, Any]:
        return {"userId": self.account_id, "token": self.token}

    @classmethod
    def from_record(cls, r: Any) -> Optional["SessionPointer"]:
        if not isinstance(r, dict) or not r.get("userId"):
            return None
        return cls(account_id=str(r["userId"]), token=str(r.get("token", "")))


@dataclass(frozen=True)
class SignupData:
    employee_id: str
    email: str
    password: str
    first_name: str
    last_name: str
    role: str = "employee"
    confirm_password: Optional[str] = None
