from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: an employee or admin account.

    Note: Plain data object, no storage access. Passwords are kept in plaintext
    to stay compatible with the stored data of the browser version.
    """

    id: str
    employee_id: str
    email: str
    password: str
    first_name: str
    last_name: str
    role: Role
    department: str = ""
    position: str = ""
    phone: str = ""
    address: str = ""
    join_date: Optional[date] = None
    profile_picture_ref: Optional[str] = None
    is_verified: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "email": self.email,
            "password": self.password,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role.value,
            "department": self.department,
            "position": self.position,
            "phone": self.phone,
            "address": self.address,
            "joinDate": self.join_date.isoformat() if self.join_date else None,
            "profilePicture": self.profile_picture_ref,
            "isVerified": self.is_verified,
        }

    @classmethod
    def from_record(cls, r: Dict[str, Any]) -> "Account":
        join_date = r.get("joinDate")
        return cls(
            id=str(r["id"]),
            employee_id=str(r["employeeId"]),
            email=str(r["email"]),
            password=str(r.get("password", "")),
            first_name=_text(r.get("firstName")),
            last_name=_text(r.get("lastName")),
            role=Role(r.get("role", Role.EMPLOYEE.value)),
            department=_text(r.get("department")),
            position=_text(r.get("position")),
            phone=_text(r.get("phone")),
            address=_text(r.get("address")),
            join_date=date.fromisoformat(join_date) if join_date else None,
            profile_picture_ref=r.get("profilePicture"),
            is_verified=bool(r.get("isVerified", False)),
        )

    def public_view(self) -> Dict[str, Any]:
        """Record without the password, for API responses."""
        data = self.to_record()
        data.pop("password")
        data["fullName"] = self.full_name
        return data


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class NewAccount:
    """Input for account creation (signup form or admin 'add employee')."""

    employee_id: str
    email: str
    password: str
    first_name: str
    last_name: str
    role: Role = Role.EMPLOYEE
    department: str = ""
    position: str = ""
    phone: str = ""
    address: str = ""
    join_date: Optional[date] = None
