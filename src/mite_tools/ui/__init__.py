"""UI components for terminal output."""

from .exporters import export_time_entries_csv, time_entries_to_csv
from .tables import ResourceTable, TimeEntryTable

__all__ = [
    "ResourceTable",
    "TimeEntryTable",
    "export_time_entries_csv",
    "time_entries_to_csv",
]
