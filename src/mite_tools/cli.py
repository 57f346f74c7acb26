"""CLI entry point for mite tools."""

import json
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import click
import httpx
from rich.console import Console

from .api.client import MiteClient
from .config import (
    Credentials,
    delete_credentials,
    load_config,
    load_credentials,
    load_env_config,
    save_credentials,
)
from .exceptions import APIResponseError, ConfigurationError, MiteError, NetworkError, NotFoundError
from .log import setup_logging
from .models import Customer, Project, Service, TimeEntriesFilter, TimeEntry, User
from .ui.exporters import export_time_entries_csv
from .ui.tables import ResourceTable, TimeEntryTable

console = Console()

AT_HELP = "today, yesterday, this_week, last_week, this_month, last_month, this_year, last_year or YYYY-MM-DD"


@contextmanager
def api_errors() -> Iterator[None]:
    """Translate httpx and decoding failures into CLI errors."""
    try:
        yield
    except httpx.TransportError as e:
        raise NetworkError(f"Could not reach mite: {e}")
    except httpx.HTTPError as e:
        raise APIResponseError(f"Request failed: {e}")
    except ValueError as e:
        raise APIResponseError(f"Unexpected response from mite: {e}")


def open_client() -> MiteClient:
    """Create a client from the stored or environment configuration."""
    try:
        config = load_config()
    except ValueError as e:
        raise ConfigurationError(str(e))
    return MiteClient(config.account, config.api_key, user_agent=config.user_agent)


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def mask_key(api_key: str) -> str:
    """Show only the last four characters of an API key."""
    if len(api_key) <= 4:
        return "*" * len(api_key)
    return "*" * (len(api_key) - 4) + api_key[-4:]


def parse_user_id(value: Optional[str]) -> Any:
    if value is None or value == "current":
        return value
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter("Use a numeric user ID or 'current'", param_hint="--user-id")


def time_entry_filter_options(include_at: bool = True):
    """Attach the time entries filters as click options.

    Commands that fix the date range themselves pass ``include_at=False``.
    """
    options = [
        click.option("--user-id", help="Filter by user ID or 'current'"),
        click.option("--customer-id", type=int, help="Filter by customer ID"),
        click.option("--project-id", type=int, help="Filter by project ID"),
        click.option("--service-id", type=int, help="Filter by service ID"),
        click.option("--note", multiple=True, help="Filter by note text (repeatable)"),
        click.option("--at", help=f"Relative range: {AT_HELP}") if include_at else None,
        click.option("--from", "from_", help="Start date (YYYY-MM-DD)"),
        click.option("--to", help="End date (YYYY-MM-DD)"),
        click.option("--billable/--not-billable", default=None, help="Filter by billable status"),
        click.option("--locked/--unlocked", default=None, help="Filter by locked status"),
        click.option("--tracking/--not-tracking", default=None, help="Only entries with a running tracker"),
        click.option(
            "--sort",
            type=click.Choice(["date", "user", "customer", "project", "service", "note", "minutes", "revenue"]),
            help="Sort field",
        ),
        click.option("--direction", type=click.Choice(["asc", "desc"]), help="Sort direction"),
        click.option("--limit", "-l", type=int, help="Maximum number of entries"),
        click.option("--page", type=int, help="Page number (with --limit)"),
    ]

    def decorator(func):
        for option in reversed(options):
            if option is not None:
                func = option(func)
        return func

    return decorator


def build_filter(options: dict[str, Any]) -> TimeEntriesFilter:
    """Turn parsed click options into a TimeEntriesFilter."""
    notes = list(options.pop("note", ()) or ())
    return TimeEntriesFilter(
        user_id=parse_user_id(options.pop("user_id", None)),
        note=notes or None,
        **options,
    )


def show_time_entries(entries: list[TimeEntry], title: str, show_notes: bool, as_json: bool) -> None:
    if as_json:
        print_json([entry.model_dump(mode="json") for entry in entries])
        return

    if not entries:
        console.print("[yellow]No time entries found.[/yellow]")
        return

    TimeEntryTable(console).print_table(entries, title=title, show_notes=show_notes)


@click.group()
@click.version_option(package_name="mite-tools")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
def cli(verbose: bool):
    """mite CLI tools for time entries, projects and customers."""
    setup_logging(verbose)


@cli.group()
def auth():
    """Authentication commands."""
    pass


@auth.command("login")
@click.option("--account", prompt="mite account (subdomain)", help="Account name, e.g. 'acme' for acme.mite.de")
@click.option("--api-key", prompt="API key", hide_input=True, help="Personal API key from your mite profile")
def auth_login(account: str, api_key: str):
    """Verify and store mite credentials."""
    with api_errors(), MiteClient(account, api_key) as client:
        mite_account = client.get_account()

    if mite_account is None:
        raise MiteError(f"Could not verify credentials for account '{account}'.")

    save_credentials(Credentials(account=account, api_key=api_key))
    console.print(f"[green]Logged in to {mite_account.title or mite_account.name}.[/green]")


@auth.command("status")
def auth_status():
    """Show which credentials will be used."""
    env_account, env_api_key, _ = load_env_config()
    stored = load_credentials()

    account = env_account or (stored.account if stored else None)
    api_key = env_api_key or (stored.api_key if stored else None)

    if not account or not api_key:
        console.print("[red]Not authenticated[/red]")
        console.print("Run 'mite auth login' to authenticate.")
        return

    source = "environment" if env_account and env_api_key else "stored credentials"
    console.print("[green]Authenticated[/green]")
    console.print(f"  Account: {account}")
    console.print(f"  API key: {mask_key(api_key)}")
    console.print(f"  Source: {source}")


@auth.command("logout")
def auth_logout():
    """Remove stored credentials."""
    delete_credentials()
    console.print("[green]Logged out successfully.[/green]")


@cli.command("account")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def account_show(as_json: bool):
    """Show account details."""
    with api_errors(), open_client() as client:
        account = client.get_account()

    if account is None:
        raise NotFoundError("No account returned. Check your credentials.")

    if as_json:
        print_json(account.model_dump(mode="json"))
        return
    ResourceTable(console).print_detail(account, f"Account {account.title or account.name}")


@cli.command("me")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def me_show(as_json: bool):
    """Show the authenticated user."""
    with api_errors(), open_client() as client:
        user = client.get_myself()

    if user is None:
        raise NotFoundError("No user returned. Check your credentials.")

    if as_json:
        print_json(user.model_dump(mode="json"))
        return
    ResourceTable(console).print_detail(user, user.name)


@cli.group()
def time():
    """Time entry commands."""
    pass


@time.command("list")
@time_entry_filter_options()
@click.option("--show-notes", is_flag=True, help="Show entry notes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def time_list(show_notes: bool, as_json: bool, **filter_options):
    """List time entries with optional filters."""
    filters = build_filter(filter_options)

    with api_errors(), open_client() as client:
        entries = client.get_time_entries(filters)

    show_time_entries(entries, "Time Entries", show_notes, as_json)


@time.command("today")
@time_entry_filter_options(include_at=False)
@click.option("--show-notes", is_flag=True, help="Show entry notes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def time_today(show_notes: bool, as_json: bool, **filter_options):
    """List today's time entries."""
    filters = build_filter(filter_options)

    with api_errors(), open_client() as client:
        entries = client.get_daily_time_entries(filters)

    show_time_entries(entries, "Time Entries - Today", show_notes, as_json)


@time.command("show")
@click.argument("time_entry_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def time_show(time_entry_id: int, as_json: bool):
    """Show a single time entry."""
    with api_errors(), open_client() as client:
        entry = client.get_time_entry(time_entry_id)

    if entry is None:
        raise NotFoundError(f"Time entry {time_entry_id} not found.")

    if as_json:
        print_json(entry.model_dump(mode="json"))
        return
    ResourceTable(console).print_detail(entry, f"Time entry {entry.id}")


@time.command("export")
@time_entry_filter_options()
@click.option("--output", "-o", help="Output file (default: timestamped file name)")
def time_export(output: Optional[str], **filter_options):
    """Export time entries to CSV."""
    filters = build_filter(filter_options)

    with api_errors(), open_client() as client:
        entries = client.get_time_entries(filters)

    filepath = export_time_entries_csv(entries, output)
    console.print(f"[green]Exported {len(entries)} time entries to {filepath}[/green]")


def resource_group(name: str, label: str, model: type, singular: str) -> click.Group:
    """Build the list/show command group for a resource collection."""

    @cli.group(name, help=f"{label} commands.")
    def group():
        pass

    @group.command("list", help=f"List {name}.")
    @click.option("--archived", is_flag=True, help=f"List archived {name} instead")
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON")
    def list_command(archived: bool, as_json: bool):
        method = f"get_archived_{name}" if archived else f"get_{name}"
        with api_errors(), open_client() as client:
            items = getattr(client, method)()

        if as_json:
            print_json([item.model_dump(mode="json") for item in items])
            return

        if not items:
            console.print(f"[yellow]No {name} found.[/yellow]")
            return

        title = f"Archived {label}" if archived else label
        ResourceTable(console).print_table(items, model, title=title)

    @group.command("show", help=f"Show a single {singular}.")
    @click.argument("item_id", type=int)
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON")
    def show_command(item_id: int, as_json: bool):
        with api_errors(), open_client() as client:
            item = getattr(client, f"get_{singular}")(item_id)

        if item is None:
            raise NotFoundError(f"{singular.capitalize()} {item_id} not found.")

        if as_json:
            print_json(item.model_dump(mode="json"))
            return
        ResourceTable(console).print_detail(item, f"{singular.capitalize()} {item.name}")

    return group


customers = resource_group("customers", "Customers", Customer, "customer")
projects = resource_group("projects", "Projects", Project, "project")
services = resource_group("services", "Services", Service, "service")
users = resource_group("users", "Users", User, "user")


def scoped_entries_command(group: click.Group, scope: str):
    """Add an `entries ID` command listing time entries of one project or customer."""

    @group.command("entries", help=f"List time entries of a {scope}.")
    @click.argument("item_id", type=int)
    @click.option("--at", help=f"Relative range: {AT_HELP}")
    @click.option("--show-notes", is_flag=True, help="Show entry notes")
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON")
    def entries_command(item_id: int, at: Optional[str], show_notes: bool, as_json: bool):
        filters = TimeEntriesFilter(at=at)
        with api_errors(), open_client() as client:
            entries = getattr(client, f"get_time_entries_of_{scope}")(item_id, filters)

        show_time_entries(entries, f"Time Entries - {scope.capitalize()} {item_id}", show_notes, as_json)

    return entries_command


scoped_entries_command(projects, "project")
scoped_entries_command(customers, "customer")


if __name__ == "__main__":
    cli()
