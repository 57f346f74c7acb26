"""Rich table formatters for CLI output."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import Customer, Project, Service, TimeEntry, User


def format_date(value: Optional[datetime], with_time: bool = False) -> str:
    """Format a parsed API date for display."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M" if with_time else "%Y-%m-%d")


def format_cents(value: Optional[float]) -> str:
    """Format an amount given in cents."""
    if value is None:
        return "-"
    return f"{Decimal(str(value)) / 100:.2f}"


def format_flag(value: bool) -> Text:
    return Text("yes", style="green") if value else Text("no", style="dim")


class TimeEntryTable:
    """Rich table formatter for time entries."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(
        self,
        entries: list[TimeEntry],
        title: Optional[str] = None,
        show_notes: bool = False,
    ) -> Table:
        """Create a Rich table from time entries."""
        table = Table(title=title, show_footer=True)

        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Date", style="cyan", no_wrap=True)
        table.add_column("User", style="green")
        table.add_column("Customer", style="yellow")
        table.add_column("Project", style="blue")
        table.add_column("Service")
        table.add_column("Hours", justify="right", style="magenta")
        table.add_column("Billable", justify="center")
        table.add_column("Locked", justify="center")

        if show_notes:
            table.add_column("Note", max_width=30)

        total_hours = Decimal("0")

        for entry in entries:
            total_hours += entry.hours

            cells = [
                str(entry.id),
                format_date(entry.date_at),
                entry.user_name or "-",
                entry.customer_name or "-",
                entry.project_name or "-",
                entry.service_name or "-",
                f"{entry.hours:.2f}",
                format_flag(entry.billable),
                format_flag(entry.locked),
            ]

            if show_notes:
                note = entry.note or ""
                cells.append(note[:27] + "..." if len(note) > 30 else note)

            table.add_row(*cells)

        table.columns[5].footer = Text("TOTAL", style="bold")
        table.columns[6].footer = Text(f"{total_hours:.2f}", style="bold magenta")

        return table

    def print_table(
        self,
        entries: list[TimeEntry],
        title: Optional[str] = None,
        show_notes: bool = False,
    ) -> None:
        """Print the time entries table."""
        table = self.create_table(entries, title, show_notes)
        self.console.print(table)


# (header, attribute, style) per column
RESOURCE_COLUMNS: dict[type, list[tuple[str, str, Optional[str]]]] = {
    Customer: [
        ("ID", "id", "dim"),
        ("Name", "name", "green"),
        ("Hourly Rate", "hourly_rate", None),
        ("Archived", "archived", None),
    ],
    Project: [
        ("ID", "id", "dim"),
        ("Name", "name", "blue"),
        ("Customer", "customer_name", "yellow"),
        ("Budget", "budget", None),
        ("Budget Type", "budget_type", None),
        ("Archived", "archived", None),
    ],
    Service: [
        ("ID", "id", "dim"),
        ("Name", "name", "green"),
        ("Hourly Rate", "hourly_rate", None),
        ("Billable", "billable", None),
        ("Archived", "archived", None),
    ],
    User: [
        ("ID", "id", "dim"),
        ("Name", "name", "green"),
        ("Email", "email", "cyan"),
        ("Role", "role", None),
        ("Archived", "archived", None),
    ],
}


def _cell(attribute: str, value: Any) -> Any:
    if isinstance(value, bool):
        return format_flag(value)
    if attribute == "hourly_rate":
        return format_cents(value)
    if value is None:
        return "-"
    return str(value)


class ResourceTable:
    """Rich table formatter for customers, projects, services and users."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(self, items: list[BaseModel], model: type, title: Optional[str] = None) -> Table:
        """Create a Rich table with the columns configured for ``model``."""
        columns = RESOURCE_COLUMNS[model]
        table = Table(title=title)

        for header, attribute, style in columns:
            justify = "right" if attribute in ("hourly_rate", "budget") else "left"
            table.add_column(header, style=style, justify=justify)

        for item in items:
            table.add_row(*[_cell(attribute, getattr(item, attribute)) for _, attribute, _ in columns])

        return table

    def print_table(self, items: list[BaseModel], model: type, title: Optional[str] = None) -> None:
        """Print the resource table."""
        self.console.print(self.create_table(items, model, title))

    def print_detail(self, item: BaseModel, title: str) -> None:
        """Print every field of a single record."""
        self.console.print()
        self.console.print(f"[bold]{title}[/bold]")
        for name, value in item.model_dump().items():
            if isinstance(value, datetime):
                value = format_date(value, with_time=True)
            elif value is None or value == []:
                value = "[dim]-[/dim]"
            self.console.print(f"  {name.replace('_', ' ').capitalize()}: {value}")
        self.console.print()
