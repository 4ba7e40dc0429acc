"""Example: drive the services directly, without Flask.

Controllers are a thin layer; everything below works the same from a script.
"""

from datetime import date, datetime

from src.dayflow.dayflow.container import build_container
from src.dayflow.dayflow.exports.payslip import payslip_text
from src.dayflow.dayflow.storage.kv import MemoryKeyValueStore


def main():
    container = build_container(backend=MemoryKeyValueStore(), auth_delay_seconds=0)
    sessions = container.session_manager(MemoryKeyValueStore())

    rahul = sessions.login("rahul@dayflow.com", "employee123")
    container.attendance_ledger.check_in(rahul.id, now=datetime(2024, 1, 8, 9, 0))
    record = container.attendance_ledger.check_out(rahul.id, now=datetime(2024, 1, 8, 17, 30))
    print("hours:", record.hours)

    leave = container.leave_ledger.submit(
        employee_id=rahul.employee_id,
        type="Sick Leave",
        start_date=date(2024, 1, 15),
        end_date=date(2024, 1, 16),
        reason="Fever",
    )
    print("leave:", leave.request_id, leave.days, leave.status.value)

    for payslip in container.payroll_ledger.list_for_employee(rahul.employee_id):
        print(payslip_text(payslip))


if __name__ == "__main__":
    main()
