from __future__ import annotations

import io
from dataclasses import asdict
from datetime import date

from flask import Flask, Response, g, request, send_file

from ..common.datetime_utils import now_local
from ..common.http import date_field, enum_field, ok
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..exports.csv_export import attendance_csv, attendance_filename
from ..exports.workbook import attendance_workbook_filename, attendance_xlsx
from ..sessions.guards import make_guards
from .model import AttendanceRow
from .service import monthly_summary


def _row_json(row: AttendanceRow) -> dict:
    return {
        "employeeName": row.employee_name,
        "employeeId": row.employee_id,
        "date": row.work_date.isoformat(),
        "checkIn": row.check_in,
        "checkOut": row.check_out,
        "hours": row.hours,
        "status": row.status.value,
    }


def register(app: Flask, container) -> None:
    _, login_required, admin_required = make_guards(container)
    ledger = container.attendance_ledger

    def _report():
        day = date_field(request.args.get("date"), "Date", default=now_local().date())
        status = enum_field(AttendanceStatus, request.args.get("status"))
        return day, ledger.daily_report(day, status=status, search=request.args.get("search"))

    @app.route("/attendance/check-in", methods=["POST"], endpoint="check_in")
    @login_required
    def check_in():
        record = ledger.check_in(g.current_user.id)
        return ok(record.to_record())

    @app.route("/attendance/check-out", methods=["POST"], endpoint="check_out")
    @login_required
    def check_out():
        record = ledger.check_out(g.current_user.id)
        return ok(record.to_record())

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        try:
            limit = int(request.args.get("limit") or DEFAULT_HISTORY_LIMIT)
        except ValueError:
            raise ValidationError("limit must be a number")
        if limit < 1:
            raise ValidationError("limit must be at least 1")

        today: date = now_local().date()
        records = ledger.history(g.current_user.id)
        today_record = ledger.today_record(g.current_user.id, today=today)
        summary = monthly_summary(records, today.year, today.month)
        return ok(
            [r.to_record() for r in records[:limit]],
            today=today_record.to_record() if today_record else None,
            summary=asdict(summary),
        )

    @app.route("/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    def admin_attendance():
        _, report = _report()
        return ok(
            [_row_json(r) for r in report.rows],
            counts=report.counts,
            dangling=len(report.dangling),
        )

    @app.route("/admin/attendance.csv", methods=["GET"], endpoint="export_attendance_csv")
    @admin_required
    def export_attendance_csv():
        day, report = _report()
        return Response(
            attendance_csv(report.rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={attendance_filename(day)}"},
        )

    @app.route("/admin/attendance.xlsx", methods=["GET"], endpoint="export_attendance_xlsx")
    @admin_required
    def export_attendance_xlsx():
        day, report = _report()
        return send_file(
            io.BytesIO(attendance_xlsx(report.rows)),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=attendance_workbook_filename(day),
        )
