from src.dayflow.dayflow.core.constants import ACCOUNTS_KEY, ATTENDANCE_KEY
from src.dayflow.dayflow.storage.migrations import migrate_attendance_keys
from src.dayflow.dayflow.storage.seed import seed_accounts


def test_legacy_records_are_rekeyed_by_employee_id(store):
    store.write(ACCOUNTS_KEY, seed_accounts())
    store.write(
        ATTENDANCE_KEY,
        [
            {"id": "2_2024-01-08", "date": "2024-01-08", "checkIn": "09:00", "checkOut": None, "hours": 0, "status": "present"},
            {"id": "EMP003_2024-01-08", "employeeId": "EMP003", "date": "2024-01-08", "hours": 0, "status": "present"},
            {"id": "99_2024-01-08", "date": "2024-01-08", "hours": 0, "status": "present"},
        ],
    )

    assert migrate_attendance_keys(store) == 1

    by_id = {r["id"]: r for r in store.read(ATTENDANCE_KEY)}
    assert set(by_id) == {"EMP002_2024-01-08", "EMP003_2024-01-08", "99_2024-01-08"}
    assert by_id["EMP002_2024-01-08"]["employeeId"] == "EMP002"
    assert "employeeId" not in by_id["99_2024-01-08"]


def test_nothing_to_migrate(store):
    assert migrate_attendance_keys(store) == 0
    assert store.read(ATTENDANCE_KEY) is None
