from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    type: str
    start_date: date
    end_date: date
    days: int
    reason: str
    status: LeaveStatus
    applied_date: date

    @property
    def is_decided(self) -> bool:
        return self.status != LeaveStatus.PENDING

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "type": self.type,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
            "appliedDate": self.applied_date.isoformat(),
        }

    @classmethod
    def from_record(cls, r: Dict[str, Any]) -> "LeaveRequest":
        return cls(
            request_id=str(r["id"]),
            employee_id=str(r["employeeId"]),
            type=r.get("type", ""),
            start_date=date.fromisoformat(r["startDate"]),
            end_date=date.fromisoformat(r["endDate"]),
            days=int(r["days"]),
            reason=r.get("reason", ""),
            status=LeaveStatus(r["status"]),
            applied_date=date.fromisoformat(r["appliedDate"]),
        )


@dataclass(frozen=True)
class LeaveRow:
    """Leave request joined with the requesting employee's name."""

    request: LeaveRequest
    employee_name: str
