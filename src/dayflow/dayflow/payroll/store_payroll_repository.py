from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import PAYROLL_KEY
from ..storage.record_store import Record, RecordStore
from .model import PayrollRecord
from .repository import PayrollRepository


class StorePayrollRepository(PayrollRepository):
    def __init__(self, store: RecordStore, *, seed: Optional[Callable[[], Sequence[Record]]] = None):
        self._store = store
        self._seed = seed

    def list_all(self) -> List[PayrollRecord]:
        return [PayrollRecord.from_record(r) for r in self._store.load(PAYROLL_KEY, self._seed)]

    def add_many(self, records: Sequence[PayrollRecord]) -> None:
        raw = self._store.load(PAYROLL_KEY, self._seed)
        raw.extend(r.to_record() for r in records)
        self._store.write(PAYROLL_KEY, raw)

    def save_all(self, records: Sequence[PayrollRecord]) -> None:
        self._store.write(PAYROLL_KEY, [r.to_record() for r in records])
