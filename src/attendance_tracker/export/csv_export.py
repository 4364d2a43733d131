"""CSV export of the currently loaded attendance records.

Built entirely from in-memory records; nothing is read from the store.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_date, format_time
from ..core.constants import (
    CSV_FILENAME_TEMPLATE,
    CSV_HEADERS,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    ISO_DATE_FORMAT,
)

CSV_MIMETYPE = "text/csv"
CSV_ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: bytes


def export_filename(selected_date: date) -> str:
    return CSV_FILENAME_TEMPLATE.format(day=selected_date.strftime(ISO_DATE_FORMAT))


def record_to_row(
    record: AttendanceRecord,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[str]:
    return [
        record.employee.name,
        record.employee.employee_id,
        format_time(record.check_in, time_format),
        format_time(record.check_out, time_format),
        format_date(record.work_date, date_format),
    ]


def build_csv_text(
    records: Iterable[AttendanceRecord],
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(record_to_row(record, time_format=time_format, date_format=date_format))
    return out.getvalue()


def export_attendance_csv(
    records: Iterable[AttendanceRecord],
    selected_date: date,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> CsvExport:
    text = build_csv_text(records, time_format=time_format, date_format=date_format)
    # utf-8-sig: content starts with the BOM.
    return CsvExport(filename=export_filename(selected_date), content=text.encode(CSV_ENCODING))
