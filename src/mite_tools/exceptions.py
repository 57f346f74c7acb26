"""Exception hierarchy for the mite CLI."""

import click
from rich.console import Console


class MiteError(click.ClickException):
    """Base exception for all mite CLI errors."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def show(self, file=None) -> None:
        """Display error with Rich formatting."""
        console = Console(stderr=True)
        console.print(f"[red]Error:[/red] {self.format_message()}")

    def format_message(self) -> str:
        """Override in subclasses for custom formatting."""
        return self.message


class ConfigurationError(MiteError):
    """Account name or API key missing."""

    def format_message(self) -> str:
        return f"{self.message}\n\nRun 'mite auth login' to store your credentials."


class NetworkError(MiteError):
    """Network connectivity issue."""

    def format_message(self) -> str:
        return f"{self.message}\n\nCheck your internet connection and try again."


class APIResponseError(MiteError):
    """API returned unexpected response format."""

    pass


class NotFoundError(MiteError):
    """A requested resource was not returned by the API."""

    exit_code = 3
