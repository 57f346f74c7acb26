"""Unit tests for CSV export and table rendering."""

import csv
from datetime import datetime
from io import StringIO

from rich.console import Console

from mite_tools.models import Project, TimeEntry
from mite_tools.ui.exporters import export_time_entries_csv, time_entries_to_csv
from mite_tools.ui.tables import ResourceTable, TimeEntryTable


def make_entries():
    return [
        TimeEntry(id=1, minutes=90, date_at=datetime(2024, 1, 15), project_name="Website", revenue=12000.0),
        TimeEntry(id=2, minutes=30, billable=False, locked=True, note="standup"),
    ]


class TestTimeEntriesCsv:
    """Tests for time entry CSV export."""

    def test_rows(self):
        rows = list(csv.reader(StringIO(time_entries_to_csv(make_entries()))))

        assert rows[0][0] == "ID"
        assert rows[1][:2] == ["1", "2024-01-15"]
        assert rows[1][7] == "1.50"
        assert rows[1][10] == "120.00"
        assert rows[2][8:10] == ["no", "yes"]
        assert rows[2][10] == ""
        assert rows[2][11] == "standup"

    def test_export_writes_file(self, tmp_path):
        target = tmp_path / "entries.csv"

        path = export_time_entries_csv(make_entries(), str(target))

        assert path == str(target)
        assert target.read_text().startswith("ID,Date,User")


class TestTables:
    """Smoke tests for Rich tables."""

    def test_time_entry_table(self):
        table = TimeEntryTable(Console(file=StringIO())).create_table(make_entries(), show_notes=True)

        assert table.row_count == 2
        assert len(table.columns) == 10

    def test_resource_table(self):
        projects = [Project(id=42, name="Website", customer_name="Kunde GmbH", budget=600)]

        table = ResourceTable(Console(file=StringIO())).create_table(projects, Project, title="Projects")

        assert table.row_count == 1
        assert [c.header for c in table.columns][:3] == ["ID", "Name", "Customer"]
