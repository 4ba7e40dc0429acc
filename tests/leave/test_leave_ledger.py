from datetime import date

import pytest

from src.dayflow.dayflow.core.enums import LeaveStatus
from src.dayflow.dayflow.core.exceptions import (
    AlreadyDecidedError,
    InvalidDateRangeError,
    NotFoundError,
    ValidationError,
)
from src.dayflow.dayflow.leave.service import LeaveLedger, count_by_status
from src.dayflow.dayflow.leave.store_leave_repository import StoreLeaveRepository


@pytest.fixture
def ledger(container, store):
    ids = iter(f"leave_{n}" for n in range(1, 100))
    return LeaveLedger(
        StoreLeaveRepository(store),
        container.directory,
        today=lambda: date(2024, 1, 5),
        id_factory=lambda: next(ids),
    )


def _sick_day(ledger, **overrides):
    data = dict(
        employee_id="EMP002",
        type="Sick Leave",
        start_date=date(2024, 1, 8),
        end_date=date(2024, 1, 8),
        reason="Fever",
    )
    data.update(overrides)
    return ledger.submit(**data)


def test_single_day_request_is_pending(ledger):
    request = _sick_day(ledger)

    assert request.request_id == "leave_1"
    assert request.days == 1
    assert request.status == LeaveStatus.PENDING
    assert request.applied_date == date(2024, 1, 5)
    assert ledger.get("leave_1") == request


def test_days_are_inclusive(ledger):
    assert _sick_day(ledger, end_date=date(2024, 1, 12)).days == 5


def test_default_type(ledger):
    assert _sick_day(ledger, type="  ").type == "Paid Leave"


def test_end_before_start_is_refused(ledger):
    with pytest.raises(InvalidDateRangeError):
        _sick_day(ledger, start_date=date(2024, 1, 10), end_date=date(2024, 1, 8))
    assert ledger.list_for_employee("EMP002") == []


def test_reason_is_required(ledger):
    with pytest.raises(ValidationError):
        _sick_day(ledger, reason=" ")


def test_decision_is_final(ledger):
    request = _sick_day(ledger)

    approved = ledger.approve(request.request_id)
    assert approved.status == LeaveStatus.APPROVED
    assert ledger.get(request.request_id).status == LeaveStatus.APPROVED

    with pytest.raises(AlreadyDecidedError):
        ledger.approve(request.request_id)
    assert ledger.get(request.request_id).status == LeaveStatus.APPROVED

    with pytest.raises(AlreadyDecidedError):
        ledger.reject(request.request_id)
    assert ledger.get(request.request_id).status == LeaveStatus.APPROVED


def test_rejection_is_final(ledger):
    request = _sick_day(ledger)
    assert ledger.reject(request.request_id).status == LeaveStatus.REJECTED

    with pytest.raises(AlreadyDecidedError):
        ledger.reject(request.request_id)
    assert ledger.get(request.request_id).status == LeaveStatus.REJECTED

    with pytest.raises(AlreadyDecidedError):
        ledger.approve(request.request_id)
    assert ledger.get(request.request_id).status == LeaveStatus.REJECTED


def test_unknown_request(ledger):
    with pytest.raises(NotFoundError):
        ledger.reject("leave_missing")


def test_listing_joins_employee_names_and_reports_dangling(ledger, container):
    _sick_day(ledger)
    _sick_day(ledger, employee_id="EMP003")
    _sick_day(ledger, employee_id="EMP404")
    ledger.reject("leave_2")

    listing = ledger.list_all()
    assert [(r.request.employee_id, r.employee_name) for r in listing.rows] == [
        ("EMP002", "Rahul Kumar"),
        ("EMP003", "Ananya Patel"),
    ]
    assert [r.employee_id for r in listing.dangling] == ["EMP404"]

    pending = ledger.list_all(status=LeaveStatus.PENDING)
    assert [r.request.request_id for r in pending.rows] == ["leave_1"]
    assert [r.request.request_id for r in ledger.list_all(search="ananya").rows] == ["leave_2"]


def test_count_by_status(ledger):
    _sick_day(ledger)
    _sick_day(ledger)
    ledger.approve("leave_1")

    counts = count_by_status(ledger.list_for_employee("EMP002"))
    assert counts == {"pending": 1, "approved": 1, "rejected": 0}
