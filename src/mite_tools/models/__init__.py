"""Data models for mite API responses."""

from .schemas import (
    Account,
    User,
    TimeEntry,
    TimeEntriesFilter,
    Customer,
    Project,
    Service,
)

__all__ = [
    "Account",
    "User",
    "TimeEntry",
    "TimeEntriesFilter",
    "Customer",
    "Project",
    "Service",
]
