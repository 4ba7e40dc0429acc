from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..core.constants import ATTENDANCE_KEY
from ..storage.record_store import RecordStore
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> List[AttendanceRecord]:
        out: List[AttendanceRecord] = []
        for r in self._store.read(ATTENDANCE_KEY) or []:
            if "employeeId" not in r:
                logger.warning("Attendance record %r has no employeeId; run the key migration", r.get("id"))
                continue
            out.append(AttendanceRecord.from_record(r))
        return out

    def list_for_employee(self, employee_id: str) -> List[AttendanceRecord]:
        needle = employee_id.lower()
        return [r for r in self.list_all() if r.employee_id.lower() == needle]

    def list_for_date(self, work_date: date) -> List[AttendanceRecord]:
        return [r for r in self.list_all() if r.work_date == work_date]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self.list_for_employee(employee_id):
            if r.work_date == work_date:
                return r
        return None

    def upsert(self, record: AttendanceRecord) -> None:
        raw = self._store.read(ATTENDANCE_KEY) or []
        new = record.to_record()
        for i, r in enumerate(raw):
            if r.get("id") == new["id"]:
                raw[i] = new
                break
        else:
            raw.append(new)
        self._store.write(ATTENDANCE_KEY, raw)
