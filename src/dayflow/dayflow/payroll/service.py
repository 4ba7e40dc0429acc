from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional

from ..common.datetime_utils import is_month
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import PayrollStatus, Role
from ..core.exceptions import DuplicatePayrollRecordError, ValidationError
from ..users.service import UserDirectory
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord, PayrollSummary
from .repository import PayrollRepository
from .state_machine import PayrollStateMachine

logger = logging.getLogger(__name__)


class PayrollLedger:
    def __init__(
        self,
        payroll: PayrollRepository,
        directory: UserDirectory,
        *,
        calculator: Optional[PayrollCalculator] = None,
        id_factory: Callable[[], str] = lambda: f"pay_{uuid.uuid4().hex[:12]}",
    ):
        self._payroll = payroll
        self._directory = directory
        self._calculator = calculator or StandardPayrollCalculator()
        self._new_id = id_factory

    @staticmethod
    def _require_month(month: str) -> str:
        if not is_month(month or ""):
            raise ValidationError("Month must be YYYY-MM")
        return month

    def create(
        self,
        *,
        employee_id: str,
        month: str,
        base_salary: float,
        allowances: float = 0,
        deductions: float = 0,
        employee_name: Optional[str] = None,
        department: Optional[str] = None,
        position: Optional[str] = None,
    ) -> PayrollRecord:
        record = self._build(
            employee_id=employee_id,
            month=month,
            base_salary=base_salary,
            allowances=allowances,
            deductions=deductions,
            employee_name=employee_name,
            department=department,
            position=position,
        )
        self._ensure_unique([record])
        self._payroll.add_many([record])
        return record

    def create_for_department(
        self,
        *,
        month: str,
        department: str,
        base_salary: float,
        allowances: float = 0,
        deductions: float = 0,
    ) -> List[PayrollRecord]:
        """Batch: a pending record for each employee of the department still missing one."""
        month = self._require_month(month)
        department = require_non_empty(department, "Department")

        existing = {r.employee_id.lower() for r in self._payroll.list_all() if r.month == month}
        batch = [
            self._build(
                employee_id=a.employee_id,
                month=month,
                base_salary=base_salary,
                allowances=allowances,
                deductions=deductions,
            )
            for a in self._directory.list_accounts(role=Role.EMPLOYEE)
            if a.department.lower() == department.lower() and a.employee_id.lower() not in existing
        ]
        if batch:
            self._payroll.add_many(batch)
        return batch

    def _build(
        self,
        *,
        employee_id: str,
        month: str,
        base_salary: float,
        allowances: float,
        deductions: float,
        employee_name: Optional[str] = None,
        department: Optional[str] = None,
        position: Optional[str] = None,
    ) -> PayrollRecord:
        employee_id = require_non_empty(employee_id, "Employee ID")
        month = self._require_month(month)
        base = require_non_negative(base_salary, "Base salary")
        extra = require_non_negative(allowances, "Allowances")
        minus = require_non_negative(deductions, "Deductions")
        for value, label in ((employee_name, "Employee name"), (department, "Department"), (position, "Position")):
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"{label} must be text")

        account = self._directory.find_by_employee_id(employee_id)
        if account:
            employee_name = employee_name or account.full_name
            department = department if department is not None else account.department
            position = position if position is not None else account.position

        return PayrollRecord(
            record_id=self._new_id(),
            employee_id=account.employee_id if account else employee_id,
            employee_name=employee_name or "",
            department=department or "",
            position=position or "",
            month=month,
            base_salary=base,
            allowances=extra,
            deductions=minus,
            net_salary=self._calculator.net_salary(base_salary=base, allowances=extra, deductions=minus),
            status=PayrollStatus.PENDING,
        )

    def _ensure_unique(self, new_records: Iterable[PayrollRecord]) -> None:
        taken = {(r.employee_id.lower(), r.month) for r in self._payroll.list_all()}
        for r in new_records:
            if (r.employee_id.lower(), r.month) in taken:
                raise DuplicatePayrollRecordError(f"Payroll for {r.employee_id} in {r.month} already exists")

    def list_for_employee(self, employee_id: str, *, month: Optional[str] = None) -> List[PayrollRecord]:
        needle = employee_id.lower()
        out = [r for r in self._payroll.list_all() if r.employee_id.lower() == needle]
        if month:
            out = [r for r in out if r.month == month]
        return sorted(out, key=lambda r: r.month, reverse=True)

    def list_all(
        self,
        *,
        month: Optional[str] = None,
        status: Optional[PayrollStatus] = None,
        department: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[PayrollRecord]:
        q = (search or "").strip().lower()
        out: List[PayrollRecord] = []
        for r in self._payroll.list_all():
            if month and r.month != month:
                continue
            if status is not None and r.status != status:
                continue
            if department and r.department != department:
                continue
            if q and q not in r.employee_name.lower() and q not in r.employee_id.lower():
                continue
            out.append(r)
        return out

    def summary(self, records: Optional[Iterable[PayrollRecord]] = None) -> PayrollSummary:
        return summarize(self._payroll.list_all() if records is None else records)

    def departments(self) -> List[str]:
        return sorted({r.department for r in self._payroll.list_all() if r.department})

    def process_pending(self, month: str) -> int:
        """Move every pending record of the month to processed. Returns how many moved."""
        month = self._require_month(month)

        records = list(self._payroll.list_all())
        changed = 0
        for i, r in enumerate(records):
            if r.month == month and r.status == PayrollStatus.PENDING:
                PayrollStateMachine.validate_transition(r.status, PayrollStatus.PROCESSED)
                records[i] = replace(r, status=PayrollStatus.PROCESSED)
                changed += 1

        if changed:
            self._payroll.save_all(records)
        logger.info("Processed %d pending payroll record(s) for %s", changed, month)
        return changed


def summarize(records: Iterable[PayrollRecord]) -> PayrollSummary:
    records = list(records)
    status_counts = {s.value: 0 for s in PayrollStatus}
    by_department: Dict[str, Dict[str, float]] = {}
    for r in records:
        status_counts[r.status.value] += 1
        dept = by_department.setdefault(r.department or "-", {"total": 0, "count": 0})
        dept["total"] += r.net_salary
        dept["count"] += 1

    return PayrollSummary(
        total_net=sum(r.net_salary for r in records),
        total_base=sum(r.base_salary for r in records),
        total_allowances=sum(r.allowances for r in records),
        total_deductions=sum(r.deductions for r in records),
        status_counts=status_counts,
        by_department=by_department,
    )
