from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List

from ..attendance.model import record_id_for
from ..core.constants import ACCOUNTS_KEY, ATTENDANCE_KEY
from .record_store import RecordStore

logger = logging.getLogger(__name__)


def migrate_attendance_keys(store: RecordStore) -> int:
    """Re-key legacy attendance records onto the employee id.

    Older records carried no `employeeId`; their id was `<account id>_<date>`.
    Each one whose account still exists gets `employeeId` set and its id
    rewritten. Records that cannot be resolved are left untouched.
    Returns the number of migrated records.
    """
    records = store.read(ATTENDANCE_KEY)
    if not records:
        return 0

    employee_ids: Dict[str, str] = {
        str(a.get("id")): str(a.get("employeeId")) for a in store.read(ACCOUNTS_KEY) or [] if a.get("employeeId")
    }

    migrated = 0
    out: List[dict] = []
    for record in records:
        if record.get("employeeId"):
            out.append(record)
            continue

        account_id, _, day = str(record.get("id", "")).rpartition("_")
        day = record.get("date") or day
        employee_id = employee_ids.get(account_id)
        if not employee_id or not day:
            logger.warning("Leaving legacy attendance record %r as is: no matching account", record.get("id"))
            out.append(record)
            continue

        try:
            work_date = date.fromisoformat(day)
        except ValueError:
            logger.warning("Leaving legacy attendance record %r as is: bad date %r", record.get("id"), day)
            out.append(record)
            continue

        new_id = record_id_for(employee_id, work_date)
        out.append({**record, "id": new_id, "employeeId": employee_id, "date": day})
        migrated += 1

    if migrated:
        store.write(ATTENDANCE_KEY, out)
        logger.info("Migrated %d legacy attendance record(s) to employee id keys", migrated)
    return migrated
