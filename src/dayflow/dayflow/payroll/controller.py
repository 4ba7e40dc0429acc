from __future__ import annotations

from dataclasses import asdict

from flask import Flask, Response, g, request

from ..common.datetime_utils import now_local
from ..common.http import enum_field, number_field, ok, payload
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError
from ..exports.csv_export import payroll_csv, payroll_filename
from ..exports.payslip import payslip_filename, payslip_text
from ..sessions.guards import make_guards


def register(app: Flask, container) -> None:
    _, login_required, admin_required = make_guards(container)
    ledger = container.payroll_ledger

    def _filtered():
        return ledger.list_all(
            month=request.args.get("month") or None,
            status=enum_field(PayrollStatus, request.args.get("status")),
            department=request.args.get("department") or None,
            search=request.args.get("search"),
        )

    @app.route("/payroll", methods=["GET"], endpoint="my_payroll")
    @login_required
    def my_payroll():
        records = ledger.list_for_employee(g.current_user.employee_id, month=request.args.get("month") or None)
        return ok([r.to_record() for r in records])

    @app.route("/payroll/<month>/payslip.txt", methods=["GET"], endpoint="my_payslip")
    @login_required
    def my_payslip(month: str):
        records = ledger.list_for_employee(g.current_user.employee_id, month=month)
        if not records:
            raise NotFoundError(f"No payroll record for {month}")
        record = records[0]
        return Response(
            payslip_text(record),
            mimetype="text/plain",
            headers={"Content-Disposition": f"attachment; filename={payslip_filename(record)}"},
        )

    @app.route("/admin/payroll", methods=["GET"], endpoint="admin_payroll")
    @admin_required
    def admin_payroll():
        records = _filtered()
        return ok(
            [r.to_record() for r in records],
            summary=asdict(ledger.summary(records)),
            departments=ledger.departments(),
        )

    @app.route("/admin/payroll", methods=["POST"], endpoint="create_payroll")
    @admin_required
    def create_payroll():
        data = payload()
        amounts = dict(
            base_salary=number_field(data.get("baseSalary"), "Base salary"),
            allowances=number_field(data.get("allowances"), "Allowances", default=0),
            deductions=number_field(data.get("deductions"), "Deductions", default=0),
        )
        month = str(data.get("month") or "")

        # Department batch when no single employee is named.
        if not data.get("employeeId") and data.get("department"):
            created = ledger.create_for_department(month=month, department=str(data["department"]), **amounts)
            return ok([r.to_record() for r in created], 201)

        record = ledger.create(
            employee_id=str(data.get("employeeId") or ""),
            month=month,
            employee_name=data.get("employeeName"),
            department=data.get("department"),
            position=data.get("position"),
            **amounts,
        )
        return ok(record.to_record(), 201)

    @app.route("/admin/payroll.csv", methods=["GET"], endpoint="export_payroll_csv")
    @admin_required
    def export_payroll_csv():
        filename = payroll_filename(request.args.get("month") or None, today=now_local().date())
        return Response(
            payroll_csv(_filtered()),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/admin/payroll/<month>/process", methods=["POST"], endpoint="process_payroll")
    @admin_required
    def process_payroll(month: str):
        return ok({"processed": ledger.process_pending(month)})
