from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import ISO_DATE_FORMAT, NOT_RECORDED


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def format_time(value: Optional[datetime], fmt: str) -> str:
    if value is None:
        return NOT_RECORDED
    return value.strftime(fmt)


def format_date(value: date, fmt: str) -> str:
    return value.strftime(fmt)
