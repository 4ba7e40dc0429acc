from __future__ import annotations

import io
from datetime import date
from typing import Iterable

import pandas as pd

from ..attendance.model import AttendanceRow
from .csv_export import ATTENDANCE_HEADER


def attendance_xlsx(rows: Iterable[AttendanceRow], *, sheet_name: str = "Attendance") -> bytes:
    """Daily attendance as an Excel workbook, same columns as the CSV export."""
    data = [
        {
            "Employee": r.employee_name,
            "Employee ID": r.employee_id,
            "Date": r.work_date.isoformat(),
            "Check In": r.check_in,
            "Check Out": r.check_out,
            "Hours": r.hours,
            "Status": r.status.value,
        }
        for r in rows
    ]
    df = pd.DataFrame(data, columns=ATTENDANCE_HEADER)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def attendance_workbook_filename(day: date) -> str:
    return f"attendance_{day.isoformat()}.xlsx"
