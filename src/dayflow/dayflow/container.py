from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceLedger
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .core.constants import DEFAULT_AUTH_DELAY_SECONDS
from .leave.service import LeaveLedger
from .leave.store_leave_repository import StoreLeaveRepository
from .payroll.service import PayrollLedger
from .payroll.store_payroll_repository import StorePayrollRepository
from .sessions.service import SessionManager
from .storage.connection import DBConfig, DatabaseConnection, ensure_database_exists
from .storage.file_store import FileKeyValueStore
from .storage.kv import KeyValueStore, MemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.record_store import RecordStore
from .storage.seed import seed_accounts, seed_payroll
from .users.service import UserDirectory
from .users.store_account_repository import StoreAccountRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    accounts_repo: StoreAccountRepository
    attendance_repo: StoreAttendanceRepository
    leaves_repo: StoreLeaveRepository
    payroll_repo: StorePayrollRepository

    directory: UserDirectory
    attendance_ledger: AttendanceLedger
    leave_ledger: LeaveLedger
    payroll_ledger: PayrollLedger

    auth_delay_seconds: float = DEFAULT_AUTH_DELAY_SECONDS

    def session_manager(self, pointer_backend: KeyValueStore) -> SessionManager:
        """A session manager bound to one browser context's pointer storage."""
        return SessionManager(
            self.directory,
            RecordStore(pointer_backend),
            delay_seconds=self.auth_delay_seconds,
        )


def build_backend(
    kind: str,
    *,
    storage_dir: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
) -> KeyValueStore:
    kind = (kind or "file").lower()
    if kind == "memory":
        return MemoryKeyValueStore()
    if kind == "file":
        return FileKeyValueStore(storage_dir or "instance/store")
    if kind == "mysql":
        config = DBConfig.from_dict(db_config or {})
        ensure_database_exists(config)
        return MySQLKeyValueStore(DatabaseConnection.get_instance(config))
    raise ValueError(f"Unknown storage backend: {kind!r}")


def build_container(
    *,
    backend: KeyValueStore,
    auth_delay_seconds: float = DEFAULT_AUTH_DELAY_SECONDS,
    seed: bool = True,
) -> Container:
    store = RecordStore(backend)

    accounts_repo = StoreAccountRepository(store, seed=seed_accounts if seed else None)
    attendance_repo = StoreAttendanceRepository(store)
    leaves_repo = StoreLeaveRepository(store)
    payroll_repo = StorePayrollRepository(store, seed=seed_payroll if seed else None)

    directory = UserDirectory(accounts_repo)
    attendance_ledger = AttendanceLedger(attendance_repo, directory)
    leave_ledger = LeaveLedger(leaves_repo, directory)
    payroll_ledger = PayrollLedger(payroll_repo, directory)

    return Container(
        store=store,
        accounts_repo=accounts_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        directory=directory,
        attendance_ledger=attendance_ledger,
        leave_ledger=leave_ledger,
        payroll_ledger=payroll_ledger,
        auth_delay_seconds=float(auth_delay_seconds),
    )
