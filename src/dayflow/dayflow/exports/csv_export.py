from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable, List, Optional

from ..attendance.model import AttendanceRow
from ..payroll.model import PayrollRecord

ATTENDANCE_HEADER: List[str] = ["Employee", "Employee ID", "Date", "Check In", "Check Out", "Hours", "Status"]
PAYROLL_HEADER: List[str] = [
    "Employee ID",
    "Employee Name",
    "Department",
    "Position",
    "Base Salary",
    "Allowances",
    "Deductions",
    "Net Salary",
    "Status",
]


def _number(value: float) -> str:
    # 85000.0 -> "85000", 7.5 -> "7.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def _render(header: List[str], rows: Iterable[List[str]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buf.getvalue()


def attendance_csv(rows: Iterable[AttendanceRow]) -> str:
    return _render(
        ATTENDANCE_HEADER,
        (
            [
                r.employee_name,
                r.employee_id,
                r.work_date.isoformat(),
                r.check_in,
                r.check_out,
                _number(r.hours),
                r.status.value,
            ]
            for r in rows
        ),
    )


def payroll_csv(records: Iterable[PayrollRecord]) -> str:
    return _render(
        PAYROLL_HEADER,
        (
            [
                r.employee_id,
                r.employee_name,
                r.department,
                r.position,
                _number(r.base_salary),
                _number(r.allowances),
                _number(r.deductions),
                _number(r.net_salary),
                r.status.value,
            ]
            for r in records
        ),
    )


def attendance_filename(day: date) -> str:
    return f"attendance_{day.isoformat()}.csv"


def payroll_filename(month: Optional[str], *, today: date) -> str:
    return f"payroll_{month or 'all'}_{today.strftime('%Y%m%d')}.csv"
