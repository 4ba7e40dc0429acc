import pytest

from src.dayflow.dayflow.core.enums import PayrollStatus
from src.dayflow.dayflow.core.exceptions import InvalidTransitionError
from src.dayflow.dayflow.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.dayflow.dayflow.payroll.state_machine import PayrollStateMachine


def test_forward_transitions_only():
    assert PayrollStateMachine.can_transition(PayrollStatus.PENDING, PayrollStatus.PROCESSED)
    assert PayrollStateMachine.can_transition(PayrollStatus.PROCESSED, PayrollStatus.PAID)
    assert not PayrollStateMachine.can_transition(PayrollStatus.PENDING, PayrollStatus.PAID)
    assert not PayrollStateMachine.can_transition(PayrollStatus.PAID, PayrollStatus.PENDING)


def test_invalid_transition_raises():
    with pytest.raises(InvalidTransitionError):
        PayrollStateMachine.validate_transition(PayrollStatus.PAID, PayrollStatus.PROCESSED)


def test_standard_calculator():
    calc = StandardPayrollCalculator()
    assert calc.net_salary(base_salary=85000, allowances=15000, deductions=12000) == 88000
