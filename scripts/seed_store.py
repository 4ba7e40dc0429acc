"""Seed demo data and re-key legacy attendance records in the configured store."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.dayflow.dayflow.container import build_backend, build_container
from src.dayflow.dayflow.storage.migrations import migrate_attendance_keys


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(backend=backend, auth_delay_seconds=0, seed=True)

    # Reading a collection seeds it on first run.
    accounts = container.directory.list_accounts()
    payroll = container.payroll_ledger.list_all()
    migrated = migrate_attendance_keys(container.store)

    print(
        f"OK: store={settings.STORAGE_BACKEND} accounts={len(accounts)} "
        f"payroll={len(payroll)} migrated_attendance={migrated}"
    )


if __name__ == "__main__":
    main()
