"""Typed client and command-line tools for the mite time tracking API."""

__version__ = "0.1.0"

from .api.client import MiteClient
from .models import (
    Account,
    Customer,
    Project,
    Service,
    TimeEntriesFilter,
    TimeEntry,
    User,
)

__all__ = [
    "__version__",
    "MiteClient",
    "Account",
    "Customer",
    "Project",
    "Service",
    "TimeEntriesFilter",
    "TimeEntry",
    "User",
]
