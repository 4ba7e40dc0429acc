from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from ..common.datetime_utils import inclusive_days
from ..common.joins import join_accounts
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LEAVE_TYPE
from ..core.enums import LeaveStatus
from ..core.exceptions import AlreadyDecidedError, InvalidDateRangeError, NotFoundError
from ..users.service import UserDirectory
from .model import LeaveRequest, LeaveRow
from .repository import LeaveRepository


@dataclass(frozen=True)
class LeaveListing:
    rows: List[LeaveRow]
    dangling: List[LeaveRequest] = field(default_factory=list)


class LeaveLedger:
    """Use case: employees apply for leave, admins decide once."""

    def __init__(
        self,
        leaves: LeaveRepository,
        directory: UserDirectory,
        *,
        today: Callable[[], date] = date.today,
        id_factory: Callable[[], str] = lambda: f"leave_{uuid.uuid4().hex[:12]}",
    ):
        self._leaves = leaves
        self._directory = directory
        self._today = today
        self._new_id = id_factory

    def submit(
        self,
        *,
        employee_id: str,
        type: str,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> LeaveRequest:
        employee_id = require_non_empty(employee_id, "Employee ID")
        if end_date < start_date:
            raise InvalidDateRangeError("End date must be on or after start date")
        reason = require_non_empty(reason, "Reason")

        request = LeaveRequest(
            request_id=self._new_id(),
            employee_id=employee_id,
            type=(type or "").strip() or DEFAULT_LEAVE_TYPE,
            start_date=start_date,
            end_date=end_date,
            days=inclusive_days(start_date, end_date),
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_date=self._today(),
        )
        self._leaves.add(request)
        return request

    def approve(self, request_id: str) -> LeaveRequest:
        return self._decide(request_id, LeaveStatus.APPROVED)

    def reject(self, request_id: str) -> LeaveRequest:
        return self._decide(request_id, LeaveStatus.REJECTED)

    def _decide(self, request_id: str, status: LeaveStatus) -> LeaveRequest:
        request = self._leaves.get(request_id)
        if not request:
            raise NotFoundError("Leave request not found")
        if request.is_decided:
            raise AlreadyDecidedError(f"Leave request already {request.status.value}")

        decided = replace(request, status=status)
        self._leaves.replace(decided)
        return decided

    def get(self, request_id: str) -> LeaveRequest:
        request = self._leaves.get(request_id)
        if not request:
            raise NotFoundError("Leave request not found")
        return request

    def list_for_employee(self, employee_id: str, *, status: Optional[LeaveStatus] = None) -> List[LeaveRequest]:
        needle = employee_id.lower()
        out = [r for r in self._leaves.list_all() if r.employee_id.lower() == needle]
        if status is not None:
            out = [r for r in out if r.status == status]
        return out

    def list_all(self, *, status: Optional[LeaveStatus] = None, search: Optional[str] = None) -> LeaveListing:
        """Admin view: every request joined with its employee."""
        joined = join_accounts(
            self._leaves.list_all(),
            self._directory.list_accounts(),
            key=lambda r: r.employee_id,
            ledger="leave",
        )

        q = (search or "").strip().lower()
        rows: List[LeaveRow] = []
        for request, account in joined.rows:
            if status is not None and request.status != status:
                continue
            if q and q not in account.full_name.lower() and q not in account.employee_id.lower():
                continue
            rows.append(LeaveRow(request=request, employee_name=account.full_name))
        return LeaveListing(rows=rows, dangling=joined.dangling)


def count_by_status(requests: Iterable[LeaveRequest]) -> Dict[str, int]:
    counts = {s.value: 0 for s in LeaveStatus}
    for r in requests:
        counts[r.status.value] += 1
    return counts
