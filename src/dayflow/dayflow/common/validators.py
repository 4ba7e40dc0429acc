from __future__ import annotations

import math
import re
from typing import Optional

from ..core.constants import PASSWORD_MIN_LENGTH
from ..core.exceptions import PasswordPolicyError, ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_email(value: Optional[str]) -> str:
    email = require_non_empty(value, "Email")
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        raise ValidationError("Email is not valid")
    return email


def check_password_policy(password: str) -> None:
    """At least 8 characters, one digit and one letter."""
    if password is None or len(password) < PASSWORD_MIN_LENGTH:
        raise PasswordPolicyError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if not re.search(r"\d", password):
        raise PasswordPolicyError("Password must contain a number")
    if not re.search(r"[a-zA-Z]", password):
        raise PasswordPolicyError("Password must contain a letter")
