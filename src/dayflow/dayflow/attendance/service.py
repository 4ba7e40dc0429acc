from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Optional

from ..common.datetime_utils import hhmm, is_working_day, now_local, round_half_up
from ..common.joins import join_accounts
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidStateError, NoOpenCheckInError
from ..users.service import UserDirectory
from .model import AttendanceRecord, AttendanceRow, AttendanceSummary
from .repository import AttendanceRepository


@dataclass(frozen=True)
class DailyReport:
    rows: List[AttendanceRow]
    dangling: List[AttendanceRecord] = field(default_factory=list)

    @property
    def counts(self) -> Dict[str, int]:
        return count_by_status(self.rows)


class AttendanceLedger:
    """Use case: daily check-in / check-out and attendance history.

    Records are keyed by the employee id of the account, the same key the
    leave and payroll ledgers use.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        directory: UserDirectory,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._directory = directory
        self._clock = clock

    def _employee_id(self, account_id: str) -> str:
        return self._directory.get(account_id).employee_id

    def check_in(self, account_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        """Start today's record.

        A second check-in on the same day replaces the first one, losing the
        earlier check-in time.
        """
        now = now or self._clock()
        record = AttendanceRecord(
            employee_id=self._employee_id(account_id),
            work_date=now.date(),
            check_in_time=now,
            check_out_time=None,
            hours=0.0,
            status=AttendanceStatus.PRESENT,
        )
        self._attendance.upsert(record)
        return record

    def check_out(self, account_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or self._clock()
        employee_id = self._employee_id(account_id)

        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if not record or not record.is_open:
            raise NoOpenCheckInError("You have not checked in today")
        if now < record.check_in_time:
            raise InvalidStateError("Check-out time is before check-in time")

        hours = (now - record.check_in_time).total_seconds() / 3600
        updated = replace(record, check_out_time=now, hours=round_half_up(hours, 1))
        self._attendance.upsert(updated)
        return updated

    def today_record(self, account_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        today = today or self._clock().date()
        return self._attendance.get_for_employee_and_date(self._employee_id(account_id), today)

    def history(self, account_id: str, *, limit: Optional[int] = None) -> List[AttendanceRecord]:
        rows = sorted(
            self._attendance.list_for_employee(self._employee_id(account_id)),
            key=lambda r: r.work_date,
            reverse=True,
        )
        return rows[:limit] if limit else rows

    def status_on(self, account_id: str, day: date, *, today: Optional[date] = None) -> Optional[AttendanceStatus]:
        """Stored status, or ABSENT for a past working day with no record.

        Returns None when nothing can be said yet (today, future, weekend).
        """
        today = today or self._clock().date()
        record = self._attendance.get_for_employee_and_date(self._employee_id(account_id), day)
        if record:
            return record.status
        if day < today and is_working_day(day):
            return AttendanceStatus.ABSENT
        return None

    def daily_report(
        self,
        day: date,
        *,
        status: Optional[AttendanceStatus] = None,
        search: Optional[str] = None,
    ) -> DailyReport:
        joined = join_accounts(
            self._attendance.list_for_date(day),
            self._directory.list_accounts(),
            key=lambda r: r.employee_id,
            ledger="attendance",
        )

        q = (search or "").strip().lower()
        rows: List[AttendanceRow] = []
        for record, account in joined.rows:
            if status is not None and record.status != status:
                continue
            if q and q not in account.full_name.lower() and q not in account.employee_id.lower():
                continue
            rows.append(
                AttendanceRow(
                    employee_name=account.full_name,
                    employee_id=account.employee_id,
                    work_date=record.work_date,
                    check_in=hhmm(record.check_in_time),
                    check_out=hhmm(record.check_out_time),
                    hours=record.hours,
                    status=record.status,
                )
            )
        return DailyReport(rows=rows, dangling=joined.dangling)


def monthly_summary(records: Iterable[AttendanceRecord], year: int, month: int) -> AttendanceSummary:
    in_month = [r for r in records if r.work_date.year == year and r.work_date.month == month]
    total = sum(r.hours for r in in_month)
    present = sum(1 for r in in_month if r.status == AttendanceStatus.PRESENT or r.check_in_time)
    average = total / present if present else 0.0
    return AttendanceSummary(
        total_hours=round_half_up(total, 1),
        present_days=present,
        average_hours=round_half_up(average, 1),
    )


def count_by_status(rows) -> Dict[str, int]:
    counter = Counter(r.status for r in rows)
    return {s.value: counter.get(s, 0) for s in AttendanceStatus}
