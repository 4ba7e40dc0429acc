from datetime import date

import pytest

from src.dayflow.dayflow.core.enums import Role
from src.dayflow.dayflow.core.exceptions import (
    AccountNotFoundError,
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    ValidationError,
)
from src.dayflow.dayflow.users.model import NewAccount


def _candidate(**overrides):
    data = dict(
        employee_id="EMP010",
        email="meera@dayflow.com",
        password="secret123",
        first_name="Meera",
        last_name="Iyer",
        department="Finance",
    )
    data.update(overrides)
    return NewAccount(**data)


def test_seeded_directory(container):
    accounts = container.directory.list_accounts()
    assert [a.employee_id for a in accounts] == ["EMP001", "EMP002", "EMP003"]
    assert container.directory.get("1").is_admin


def test_lookup_is_case_insensitive(container):
    assert container.directory.find_by_email("RAHUL@dayflow.com").employee_id == "EMP002"
    assert container.directory.find_by_employee_id("emp003").first_name == "Ananya"
    assert container.directory.find_by_email("nobody@dayflow.com") is None


def test_filter_by_role_and_search(container):
    directory = container.directory
    assert [a.id for a in directory.list_accounts(role=Role.ADMIN)] == ["1"]
    assert [a.id for a in directory.list_accounts(search="market")] == ["3"]


def test_admin_created_account_is_verified_with_next_id(container):
    account = container.directory.create(_candidate(join_date=date(2024, 2, 1)), provisioned_by_admin=True)

    assert account.id == "4"
    assert account.is_verified
    assert account.role == Role.EMPLOYEE
    assert container.directory.get("4").department == "Finance"


def test_duplicate_email_and_employee_id(container):
    with pytest.raises(DuplicateEmailError, match="An account with this email already exists"):
        container.directory.create(_candidate(email="Admin@Dayflow.com"))
    with pytest.raises(DuplicateEmployeeIdError, match="This Employee ID is already registered"):
        container.directory.create(_candidate(employee_id="emp002"))
    assert len(container.directory.list_accounts()) == 3


def test_update_allows_echoed_identity_but_not_a_change(container):
    updated = container.directory.update("2", {"employee_id": "EMP002", "phone": "+91 1"})
    assert updated.phone == "+91 1"

    with pytest.raises(ValidationError):
        container.directory.update("2", {"email": "new@dayflow.com"})
    with pytest.raises(ValidationError):
        container.directory.update("2", {"password": "x"})


def test_verify_and_delete(container):
    created = container.directory.create(_candidate())
    assert not created.is_verified
    assert container.directory.verify("meera@dayflow.com").is_verified

    container.directory.delete(created.id)
    with pytest.raises(AccountNotFoundError):
        container.directory.get(created.id)


@pytest.mark.parametrize(
    "fields",
    [
        {"department": 5},
        {"first_name": 5},
        {"phone": ["+91"]},
        {"profile_picture_ref": {"url": "x"}},
        {"join_date": 20240101},
        {"role": ["admin"]},
    ],
)
def test_update_rejects_non_text_values(container, fields):
    with pytest.raises(ValidationError):
        container.directory.update("2", fields)

    rahul = container.directory.get("2")
    assert rahul.department == "Engineering"
    assert rahul.first_name == "Rahul"
    assert [a.id for a in container.directory.list_accounts(search="eng")] == ["2"]


def test_stored_non_text_fields_are_read_as_text(container, store):
    records = store.read("accounts")
    records[1]["department"] = 5
    records[1]["firstName"] = None
    store.write("accounts", records)

    rahul = container.directory.get("2")
    assert rahul.department == "5"
    assert rahul.first_name == ""
    assert [a.id for a in container.directory.list_accounts(search="5")] == ["2"]
