from __future__ import annotations

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base + allowances - deductions."""

    def net_salary(self, *, base_salary: float, allowances: float, deductions: float) -> float:
        return base_salary + allowances - deductions
