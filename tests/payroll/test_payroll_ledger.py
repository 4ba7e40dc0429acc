import pytest

from src.dayflow.dayflow.core.enums import PayrollStatus
from src.dayflow.dayflow.core.exceptions import DuplicatePayrollRecordError, ValidationError


def test_seeded_january_payroll(container):
    records = container.payroll_ledger.list_all(month="2024-01")
    assert len(records) == 6
    rahul = container.payroll_ledger.list_for_employee("EMP002")[0]
    assert rahul.net_salary == 88000
    assert rahul.status == PayrollStatus.PROCESSED


def test_process_pending_is_idempotent(container):
    ledger = container.payroll_ledger

    assert ledger.process_pending("2024-01") == 1
    assert ledger.process_pending("2024-01") == 0
    assert ledger.list_all(month="2024-01", status=PayrollStatus.PENDING) == []
    # paid stays paid
    assert len(ledger.list_all(month="2024-01", status=PayrollStatus.PAID)) == 3


def test_process_pending_on_empty_month(container):
    assert container.payroll_ledger.process_pending("2030-05") == 0


def test_create_computes_net_once_and_fills_from_account(container):
    record = container.payroll_ledger.create(
        employee_id="emp003",
        month="2024-02",
        base_salary=75000,
        allowances=12000,
        deductions=10000,
    )

    assert record.employee_id == "EMP003"
    assert record.employee_name == "Ananya Patel"
    assert record.department == "Marketing"
    assert record.net_salary == 77000
    assert record.status == PayrollStatus.PENDING


def test_one_record_per_employee_and_month(container):
    with pytest.raises(DuplicatePayrollRecordError):
        container.payroll_ledger.create(employee_id="EMP002", month="2024-01", base_salary=1)


@pytest.mark.parametrize(
    "overrides",
    [
        {"month": "2024-13"},
        {"month": "January"},
        {"base_salary": -1},
        {"deductions": -5},
        {"base_salary": float("nan")},
        {"allowances": float("inf")},
        {"base_salary": "nan"},
        {"department": 5},
    ],
)
def test_create_rejects_bad_input(container, overrides):
    data = dict(employee_id="EMP002", month="2024-03", base_salary=1000, allowances=0, deductions=0)
    data.update(overrides)
    with pytest.raises(ValidationError):
        container.payroll_ledger.create(**data)


def test_department_batch_skips_existing(container):
    ledger = container.payroll_ledger
    ledger.create(employee_id="EMP002", month="2024-02", base_salary=85000)

    created = ledger.create_for_department(month="2024-02", department="engineering", base_salary=50000)
    assert created == []

    created = ledger.create_for_department(month="2024-02", department="Marketing", base_salary=50000, allowances=5000)
    assert [r.employee_id for r in created] == ["EMP003"]
    assert created[0].net_salary == 55000


def test_filters_and_summary(container):
    ledger = container.payroll_ledger
    engineering = ledger.list_all(department="Engineering")
    assert sorted(r.employee_id for r in engineering) == ["EMP002", "EMP005"]
    assert [r.employee_id for r in ledger.list_all(search="kavya")] == ["EMP007"]

    summary = ledger.summary()
    assert summary.total_net == 555000
    assert summary.total_base == 535000
    assert summary.status_counts == {"pending": 1, "processed": 2, "paid": 3}
    assert summary.by_department["Engineering"] == {"total": 213000, "count": 2}


def test_rejected_amount_leaves_ledger_unchanged(container):
    with pytest.raises(ValidationError):
        container.payroll_ledger.create(employee_id="EMP002", month="2024-03", base_salary=float("nan"))
    assert container.payroll_ledger.list_for_employee("EMP002", month="2024-03") == []
