"""Payroll record status transitions."""

from __future__ import annotations

from ..core.enums import PayrollStatus
from ..core.exceptions import InvalidTransitionError


class PayrollStateMachine:
    """Allowed transitions:
    - pending → processed
    - processed → paid
    """

    VALID_TRANSITIONS: dict[PayrollStatus, list[PayrollStatus]] = {
        PayrollStatus.PENDING: [PayrollStatus.PROCESSED],
        PayrollStatus.PROCESSED: [PayrollStatus.PAID],
        PayrollStatus.PAID: [],  # Terminal state
    }

    @classmethod
    def can_transition(cls, from_status: PayrollStatus, to_status: PayrollStatus) -> bool:
        return to_status in cls.VALID_TRANSITIONS.get(from_status, [])

    @classmethod
    def validate_transition(cls, from_status: PayrollStatus, to_status: PayrollStatus) -> None:
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(from_status.value, to_status.value)
