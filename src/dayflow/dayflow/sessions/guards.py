from __future__ import annotations

from functools import wraps
from typing import Callable, Tuple

from flask import g

from ..core.exceptions import AuthorizationError
from .flask_store import FlaskSessionStore
from .service import SessionManager


def make_guards(container) -> Tuple[Callable[[], SessionManager], Callable, Callable]:
    """Per-request session manager plus login/admin view decorators.

    The signed-in account is left on `g.current_user` for the view.
    """

    def sessions() -> SessionManager:
        return container.session_manager(FlaskSessionStore())

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.current_user = sessions().require_user()
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            account = sessions().require_user()
            if not account.is_admin:
                raise AuthorizationError("Admin access required")
            g.current_user = account
            return view(*args, **kwargs)

        return wrapper

    return sessions, login_required, admin_required
