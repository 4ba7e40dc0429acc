from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    """One employee's salary for one month.

    net_salary is fixed when the record is created and never re-derived.
    """

    record_id: str
    employee_id: str
    employee_name: str
    department: str
    position: str
    month: str
    base_salary: float
    allowances: float
    deductions: float
    net_salary: float
    status: PayrollStatus

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "department": self.department,
            "position": self.position,
            "month": self.month,
            "baseSalary": self.base_salary,
            "allowances": self.allowances,
            "deductions": self.deductions,
            "netSalary": self.net_salary,
            "status": self.status.value,
        }

    @classmethod
    def from_record(cls, r: Dict[str, Any]) -> "PayrollRecord":
        return cls(
            record_id=str(r["id"]),
            employee_id=str(r["employeeId"]),
            employee_name=r.get("employeeName") or "",
            department=r.get("department") or "",
            position=r.get("position") or "",
            month=str(r["month"]),
            base_salary=r.get("baseSalary", 0),
            allowances=r.get("allowances", 0),
            deductions=r.get("deductions", 0),
            net_salary=r.get("netSalary", 0),
            status=PayrollStatus(r.get("status", PayrollStatus.PENDING.value)),
        )


@dataclass(frozen=True)
class PayrollSummary:
    total_net: float
    total_base: float
    total_allowances: float
    total_deductions: float
    status_counts: Dict[str, int]
    by_department: Dict[str, Dict[str, float]]
