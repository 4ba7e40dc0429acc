from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import AttendanceStatus


def record_id_for(employee_id: str, work_date: date) -> str:
    return f"{employee_id}_{work_date.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    employee_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    hours: float
    status: AttendanceStatus

    @property
    def record_id(self) -> str:
        return record_id_for(self.employee_id, self.work_date)

    @property
    def is_open(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "checkIn": self.check_in_time.isoformat(timespec="seconds") if self.check_in_time else None,
            "checkOut": self.check_out_time.isoformat(timespec="seconds") if self.check_out_time else None,
            "hours": self.hours,
            "status": self.status.value,
        }

    @classmethod
    def from_record(cls, r: Dict[str, Any]) -> "AttendanceRecord":
        work_date = date.fromisoformat(r["date"])
        return cls(
            employee_id=str(r["employeeId"]),
            work_date=work_date,
            check_in_time=_parse_clock(work_date, r.get("checkIn")),
            check_out_time=_parse_clock(work_date, r.get("checkOut")),
            hours=float(r.get("hours") or 0),
            status=AttendanceStatus(r.get("status", AttendanceStatus.PRESENT.value)),
        )


def _parse_clock(work_date: date, value: Optional[str]) -> Optional[datetime]:
    # Browser-era records only kept "HH:MM".
    if not value:
        return None
    if len(value) <= 5 and ":" in value:
        return datetime.combine(work_date, datetime.strptime(value, "%H:%M").time())
    return parse_iso_datetime(value)


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the admin attendance screen and exports."""

    employee_name: str
    employee_id: str
    work_date: date
    check_in: str
    check_out: str
    hours: float
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    total_hours: float
    present_days: int
    average_hours: float
