from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Optional

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_month(value: str) -> bool:
    return bool(value) and bool(_MONTH_RE.match(value))


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def month_label(month: str) -> str:
    """'2024-01' -> 'January 2024'."""
    return datetime.strptime(month + "-01", "%Y-%m-%d").strftime("%B %Y")


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def is_working_day(day: date) -> bool:
    return day.weekday() < 5


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def hhmm(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else "-"
