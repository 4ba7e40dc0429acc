from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional

from ..common.validators import require_email, require_non_empty
from ..core.enums import Role
from ..core.exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    ValidationError,
)
from .model import Account, NewAccount
from .repository import AccountRepository

IDENTITY_FIELDS = frozenset({"id", "employee_id", "email"})
UPDATABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "role",
        "department",
        "position",
        "phone",
        "address",
        "join_date",
        "profile_picture_ref",
    }
)
TEXT_FIELDS = frozenset({"first_name", "last_name", "department", "position", "phone", "address"})


class UserDirectory:
    """Use case: look up and maintain accounts."""

    def __init__(self, accounts: AccountRepository, *, today=date.today):
        self._accounts = accounts
        self._today = today

    def list_accounts(self, *, role: Optional[Role] = None, search: Optional[str] = None) -> List[Account]:
        out = list(self._accounts.list_all())
        if role is not None:
            out = [a for a in out if a.role == role]
        q = (search or "").strip().lower()
        if q:
            out = [
                a
                for a in out
                if q in a.full_name.lower()
                or q in a.employee_id.lower()
                or q in a.email.lower()
                or q in a.department.lower()
            ]
        return out

    def find_by_email(self, email: str) -> Optional[Account]:
        needle = (email or "").strip().lower()
        for account in self._accounts.list_all():
            if account.email.lower() == needle:
                return account
        return None

    def find_by_employee_id(self, employee_id: str) -> Optional[Account]:
        needle = (employee_id or "").strip().lower()
        for account in self._accounts.list_all():
            if account.employee_id.lower() == needle:
                return account
        return None

    def get(self, account_id: str) -> Account:
        account = self._accounts.get_by_id(str(account_id))
        if not account:
            raise AccountNotFoundError("Account not found")
        return account

    def create(self, candidate: NewAccount, *, provisioned_by_admin: bool = False) -> Account:
        employee_id = require_non_empty(candidate.employee_id, "Employee ID")
        email = require_email(candidate.email)
        first_name = require_non_empty(candidate.first_name, "First name")
        last_name = require_non_empty(candidate.last_name, "Last name")
        if not candidate.password:
            raise ValidationError("Password is required")
        try:
            role = Role(candidate.role)
        except ValueError:
            raise ValidationError("Invalid role")

        accounts = list(self._accounts.list_all())
        if any(a.email.lower() == email.lower() for a in accounts):
            raise DuplicateEmailError("An account with this email already exists")
        if any(a.employee_id.lower() == employee_id.lower() for a in accounts):
            raise DuplicateEmployeeIdError("This Employee ID is already registered")

        account = Account(
            id=self._next_id(accounts),
            employee_id=employee_id,
            email=email,
            password=candidate.password,
            first_name=first_name,
            last_name=last_name,
            role=role,
            department=candidate.department or "",
            position=candidate.position or "",
            phone=candidate.phone or "",
            address=candidate.address or "",
            join_date=candidate.join_date or self._today(),
            is_verified=provisioned_by_admin,
        )
        accounts.append(account)
        self._accounts.save_all(accounts)
        return account

    def update(self, account_id: str, fields: Dict[str, Any]) -> Account:
        current = self.get(account_id)
        changes = self._clean_changes(current, fields)

        updated = replace(current, **changes)
        self._replace(updated)
        return updated

    def verify(self, email: str) -> Account:
        account = self.find_by_email(email)
        if not account:
            raise AccountNotFoundError("No account found with this email")
        if account.is_verified:
            return account
        verified = replace(account, is_verified=True)
        self._replace(verified)
        return verified

    def delete(self, account_id: str) -> None:
        accounts = list(self._accounts.list_all())
        remaining = [a for a in accounts if a.id != str(account_id)]
        if len(remaining) == len(accounts):
            raise AccountNotFoundError("Account not found")
        self._accounts.save_all(remaining)

    def _replace(self, account: Account) -> None:
        accounts = [account if a.id == account.id else a for a in self._accounts.list_all()]
        self._accounts.save_all(accounts)

    @staticmethod
    def _clean_changes(current: Account, fields: Dict[str, Any]) -> Dict[str, Any]:
        changes: Dict[str, Any] = {}
        for name, value in fields.items():
            if name in IDENTITY_FIELDS:
                # Profile forms echo identity fields back; only a real change is refused.
                old = getattr(current, name)
                same = str(value).lower() == old.lower() if name == "email" else str(value) == old
                if not same:
                    raise ValidationError(f"{name} cannot be changed")
                continue
            if name not in UPDATABLE_FIELDS:
                raise ValidationError(f"Unknown or read-only field: {name}")

            if name in TEXT_FIELDS and not isinstance(value, str):
                raise ValidationError(f"{name} must be text")
            if name == "profile_picture_ref" and value is not None and not isinstance(value, str):
                raise ValidationError("profile_picture_ref must be text")

            if name == "role":
                try:
                    value = Role(value)
                except (TypeError, ValueError):
                    raise ValidationError("Invalid role")
            elif name == "join_date" and not isinstance(value, date):
                if value is not None and not isinstance(value, str):
                    raise ValidationError("Join date must be YYYY-MM-DD")
                try:
                    value = date.fromisoformat(value) if value else None
                except ValueError:
                    raise ValidationError("Join date must be YYYY-MM-DD")
            elif name in {"first_name", "last_name"}:
                value = require_non_empty(value, name.replace("_", " ").capitalize())
            changes[name] = value
        return changes

    @staticmethod
    def _next_id(accounts: List[Account]) -> str:
        numeric = [int(a.id) for a in accounts if a.id.isdigit()]
        candidate = max(numeric, default=0) + 1
        taken = {a.id for a in accounts}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)
