from __future__ import annotations

import math

from ..common.datetime_utils import month_label
from ..payroll.model import PayrollRecord

RULE = "─" * 24


def format_inr(amount: float) -> str:
    """Rupee amount with Indian digit grouping, no decimals: 1234567 -> '₹12,34,567'."""
    rounded = int(math.floor(abs(amount) + 0.5))
    digits = str(rounded)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}₹{digits}"


def payslip_text(record: PayrollRecord) -> str:
    lines = [
        "PAYSLIP",
        f"Employee ID: {record.employee_id}",
        f"Employee Name: {record.employee_name}",
        f"Period: {month_label(record.month)}",
        "",
        f"Base Salary: {format_inr(record.base_salary)}",
        f"Allowances: {format_inr(record.allowances)}",
        f"Deductions: {format_inr(record.deductions)}",
        RULE,
        f"Net Salary: {format_inr(record.net_salary)}",
        "",
        f"Status: {record.status.value.upper()}",
    ]
    return "\n".join(lines) + "\n"


def payslip_filename(record: PayrollRecord) -> str:
    return f"payslip_{record.month}_{record.employee_id}.txt"
