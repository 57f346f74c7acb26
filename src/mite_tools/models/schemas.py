"""Pydantic models for mite API responses."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

AtFilter = str  # today, yesterday, this_week, ..., or a YYYY-MM-DD date
SortFilter = Literal["date", "user", "customer", "project", "service", "note", "minutes", "revenue"]
DirectionFilter = Literal["asc", "desc"]
BudgetType = Literal["minutes", "minutes_per_month", "cents", "cents_per_month"]


class Account(BaseModel):
    """The mite account itself."""

    id: int
    name: str
    title: Optional[str] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(BaseModel):
    """A user of the account."""

    id: int
    name: str
    email: Optional[str] = None
    note: Optional[str] = None
    archived: bool = False
    language: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TimeEntry(BaseModel):
    """A time entry record."""

    id: int
    minutes: int = 0
    date_at: Optional[datetime] = None
    note: Optional[str] = None
    billable: bool = True
    locked: bool = False
    revenue: Optional[float] = None  # cents
    hourly_rate: Optional[int] = None  # cents
    started_time: Optional[Any] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def hours(self) -> Decimal:
        """Duration in hours."""
        return Decimal(self.minutes) / Decimal(60)


class Customer(BaseModel):
    """A customer record."""

    id: int
    name: str
    note: Optional[str] = None
    archived: bool = False
    hourly_rate: Optional[int] = None
    active_hourly_rate: Optional[Union[str, int]] = None
    hourly_rates_per_service: list[dict] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Project(BaseModel):
    """A project, optionally belonging to a customer."""

    id: int
    name: str
    note: Optional[str] = None
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    budget: Optional[int] = None
    budget_type: Optional[BudgetType] = None
    archived: bool = False
    hourly_rate: Optional[int] = None
    active_hourly_rate: Optional[Union[str, int]] = None
    hourly_rates_per_service: list[dict] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Service(BaseModel):
    """A service that time can be tracked against."""

    id: int
    name: str
    note: Optional[str] = None
    billable: bool = True
    archived: bool = False
    hourly_rate: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TimeEntriesFilter(BaseModel):
    """Query parameters accepted by the time entries endpoint.

    ``from`` is a Python keyword, so that filter is exposed as ``from_``.
    """

    user_id: Optional[Union[Literal["current"], int]] = None
    customer_id: Optional[int] = None
    project_id: Optional[Union[int, str]] = None
    service_id: Optional[Union[int, str]] = None
    note: Optional[Union[str, list[str]]] = None
    at: Optional[AtFilter] = None
    from_: Optional[AtFilter] = Field(default=None, alias="from")
    to: Optional[AtFilter] = None
    billable: Optional[bool] = None
    locked: Optional[bool] = None
    tracking: Optional[bool] = None
    sort: Optional[SortFilter] = None
    direction: Optional[DirectionFilter] = None
    limit: Optional[int] = None
    page: Optional[int] = None

    class Config:
        populate_by_name = True

    def to_params(self) -> dict[str, Any]:
        """Set filters keyed by their wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)
