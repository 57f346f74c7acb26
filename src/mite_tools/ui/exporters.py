"""CSV export utilities for time entries."""

import csv
from datetime import datetime
from io import StringIO
from typing import Optional

from ..models import TimeEntry

CSV_HEADER = [
    "ID",
    "Date",
    "User",
    "Customer",
    "Project",
    "Service",
    "Minutes",
    "Hours",
    "Billable",
    "Locked",
    "Revenue",
    "Note",
]


def generate_csv_filename(report_type: str) -> str:
    """
    Generate timestamp-based filename for CSV export.

    Args:
        report_type: Type of export (e.g., 'time_entries')

    Returns:
        Filename with timestamp (e.g., 'time_entries_20260129T143045.csv')
    """
    timestamp = datetime.now().strftime('%Y%m%dT%H%M%S')
    return f"{report_type}_{timestamp}.csv"


def time_entries_to_csv(entries: list[TimeEntry]) -> str:
    """Render time entries as CSV text."""
    buffer = StringIO()
    writer = csv.writer(buffer)

    writer.writerow(CSV_HEADER)

    for entry in entries:
        writer.writerow([
            entry.id,
            entry.date_at.strftime("%Y-%m-%d") if entry.date_at else "",
            entry.user_name or "",
            entry.customer_name or "",
            entry.project_name or "",
            entry.service_name or "",
            entry.minutes,
            f"{entry.hours:.2f}",
            "yes" if entry.billable else "no",
            "yes" if entry.locked else "no",
            f"{entry.revenue / 100:.2f}" if entry.revenue is not None else "",
            entry.note or "",
        ])

    return buffer.getvalue()


def export_time_entries_csv(entries: list[TimeEntry], output: Optional[str]) -> str:
    """
    Export time entries to a CSV file.

    Args:
        entries: Time entries to export
        output: Optional output file path (auto-generates if None)

    Returns:
        Path to the exported CSV file
    """
    filepath = output or generate_csv_filename("time_entries")

    with open(filepath, "w", newline="") as f:
        f.write(time_entries_to_csv(entries))

    return filepath
