from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional

from ..common.validators import check_password_policy, require_non_empty
from ..core.constants import DEFAULT_AUTH_DELAY_SECONDS, SESSION_POINTER_KEY, SESSION_TOKEN_PREFIX
from ..core.enums import Role
from ..core.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    AuthorizationError,
    NotVerifiedError,
    ValidationError,
    WrongPasswordError,
)
from ..storage.record_store import RecordStore
from ..users.model import Account, NewAccount
from ..users.service import UserDirectory
from .model import SessionPointer, SignupData

logger = logging.getLogger(__name__)


class SessionManager:
    """Who is signed in for one browser context.

    Lifecycle: created -> resolves the persisted pointer on first use -> active
    -> cleared by logout. The pointer lives in its own store so each browser
    context (a Flask cookie session, a test, a script) owns exactly one.

    Note: passwords are compared in plaintext, exactly like the data they were
    stored with. Not suitable for anything beyond a demo deployment.
    """

    def __init__(
        self,
        directory: UserDirectory,
        pointer_store: RecordStore,
        *,
        delay_seconds: float = DEFAULT_AUTH_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
    ):
        self._directory = directory
        self._pointers = pointer_store
        self._delay = float(delay_seconds)
        self._sleep = sleep
        self._clock = clock

    def _simulate_latency(self) -> None:
        if self._delay > 0:
            self._sleep(self._delay)

    def login(self, email: str, password: str) -> Account:
        self._simulate_latency()

        account = self._directory.find_by_email(email)
        if not account:
            logger.info("Login failed: unknown email %s", email)
            raise AccountNotFoundError("No account found with this email")
        if account.password != password:
            logger.info("Login failed: wrong password for account %s", account.id)
            raise WrongPasswordError("Incorrect password")
        if not account.is_verified:
            raise NotVerifiedError("Please verify your email before logging in")

        pointer = SessionPointer(
            account_id=account.id,
            token=f"{SESSION_TOKEN_PREFIX}{int(self._clock() * 1000)}",
        )
        self._pointers.write_value(SESSION_POINTER_KEY, pointer.to_record())
        return account

    def signup(self, data: SignupData) -> Account:
        """Register a new, unverified account. Does not sign the user in."""
        self._simulate_latency()

        for value, name in (
            (data.employee_id, "Employee ID"),
            (data.first_name, "First name"),
            (data.last_name, "Last name"),
            (data.email, "Email"),
        ):
            require_non_empty(value, name)
        if not data.password:
            raise ValidationError("Please fill in all fields")
        check_password_policy(data.password)
        if data.confirm_password != data.password:
            raise ValidationError("Passwords do not match")

        try:
            role = Role(data.role)
        except ValueError:
            raise ValidationError("Invalid role")

        return self._directory.create(
            NewAccount(
                employee_id=data.employee_id,
                email=data.email,
                password=data.password,
                first_name=data.first_name,
                last_name=data.last_name,
                role=role,
            ),
            provisioned_by_admin=False,
        )

    def verify_email(self, email: str) -> Account:
        return self._directory.verify(email)

    def logout(self) -> None:
        self._pointers.delete(SESSION_POINTER_KEY)

    def pointer(self) -> Optional[SessionPointer]:
        return SessionPointer.from_record(self._pointers.read_value(SESSION_POINTER_KEY))

    def current_user(self) -> Optional[Account]:
        pointer = self.pointer()
        if pointer is None:
            if self._pointers.backend.get_item(SESSION_POINTER_KEY) is not None:
                logger.info("Clearing unreadable session pointer")
                self.logout()
            return None

        try:
            return self._directory.get(pointer.account_id)
        except AccountNotFoundError:
            logger.info("Clearing session for missing account %s", pointer.account_id)
            self.logout()
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def require_user(self) -> Account:
        account = self.current_user()
        if account is None:
            raise AuthenticationError("Please sign in to continue")
        return account

    def update_profile(self, fields: Dict[str, Any]) -> Account:
        account = self.require_user()
        if "role" in fields and not account.is_admin:
            raise AuthorizationError("Only an admin can change roles")
        return self._directory.update(account.id, fields)
