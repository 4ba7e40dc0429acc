from __future__ import annotations

import logging
import math
from datetime import date
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateIdentityError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (DuplicateIdentityError, 409),
    (InvalidStateError, 409),
)


def ok(data: Any = None, status: int = 200, **extra: Any):
    body = {"success": True, "data": data}
    body.update(extra)
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(exc: DomainError) -> int:
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        return fail(str(e), status_for(e))

    @app.errorhandler(Exception)
    def unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return fail(e.description or e.name, e.code or 500)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG", False):
            return fail(f"Internal error: {e}", 500)
        return fail("Internal error", 500)


def payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def date_field(value: Optional[str], name: str, *, default: Optional[date] = None) -> date:
    if not value:
        if default is not None:
            return default
        raise ValidationError(f"{name} is required")
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD")


def enum_field(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    if not value or value == "all":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid status: {value}")


def number_field(value: Any, name: str, *, default: Optional[float] = None) -> float:
    if value is None or value == "":
        if default is not None:
            return default
        raise ValidationError(f"{name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number")
    return number
