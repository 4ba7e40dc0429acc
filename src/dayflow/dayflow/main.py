from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_backend, build_container
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .storage.migrations import migrate_attendance_keys
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        backend_kind = getattr(settings, "STORAGE_BACKEND", "file")
        backend = build_backend(
            backend_kind,
            storage_dir=getattr(settings, "STORAGE_DIR", None),
            db_config=getattr(settings, "DB_CONFIG", None),
        )
        container = build_container(
            backend=backend,
            auth_delay_seconds=float(getattr(settings, "AUTH_DELAY_SECONDS", 0.5)),
            seed=bool(getattr(settings, "AUTO_SEED_STORE", True)),
        )
        logger.info("dayflow: settings=%s storage=%s", settings_module, backend_kind)

    migrate_attendance_keys(container.store)

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)
    register_leave(app, container)
    register_payroll(app, container)

    app.extensions["dayflow"] = container
    return app
