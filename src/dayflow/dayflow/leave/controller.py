from __future__ import annotations

from flask import Flask, g, request

from ..common.http import date_field, enum_field, ok, payload
from ..core.enums import LeaveStatus
from ..sessions.guards import make_guards
from .model import LeaveRow
from .service import count_by_status


def _row_json(row: LeaveRow) -> dict:
    data = row.request.to_record()
    data["employeeName"] = row.employee_name
    return data


def register(app: Flask, container) -> None:
    _, login_required, admin_required = make_guards(container)
    ledger = container.leave_ledger

    @app.route("/leaves", methods=["GET"], endpoint="my_leaves")
    @login_required
    def my_leaves():
        mine = ledger.list_for_employee(g.current_user.employee_id)
        status = enum_field(LeaveStatus, request.args.get("status"))
        shown = [r for r in mine if status is None or r.status == status]
        return ok([r.to_record() for r in shown], counts=count_by_status(mine))

    @app.route("/leaves", methods=["POST"], endpoint="apply_leave")
    @login_required
    def apply_leave():
        data = payload()
        leave = ledger.submit(
            employee_id=g.current_user.employee_id,
            type=str(data.get("type") or ""),
            start_date=date_field(data.get("startDate"), "Start date"),
            end_date=date_field(data.get("endDate"), "End date"),
            reason=str(data.get("reason") or ""),
        )
        return ok(leave.to_record(), 201)

    @app.route("/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @admin_required
    def admin_leaves():
        listing = ledger.list_all(
            status=enum_field(LeaveStatus, request.args.get("status")),
            search=request.args.get("search"),
        )
        return ok(
            [_row_json(r) for r in listing.rows],
            counts=count_by_status(r.request for r in listing.rows),
            dangling=len(listing.dangling),
        )

    @app.route("/admin/leaves/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(request_id: str):
        return ok(ledger.approve(request_id).to_record())

    @app.route("/admin/leaves/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(request_id: str):
        return ok(ledger.reject(request_id).to_record())
