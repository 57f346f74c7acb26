"""Resource descriptors used by the generic fetch in MiteClient."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from ..models import Account, Customer, Project, Service, TimeEntry, User


@dataclass(frozen=True)
class Resource:
    """Where a resource lives, which envelope key wraps it and its model."""

    endpoint: str
    data_key: str
    model: type[BaseModel]
    archived_endpoint: Optional[str] = None


ACCOUNT = Resource(endpoint="account", data_key="account", model=Account)
MYSELF = Resource(endpoint="myself", data_key="user", model=User)
TIME_ENTRIES = Resource(endpoint="time_entries", data_key="time_entry", model=TimeEntry)
CUSTOMERS = Resource(
    endpoint="customers", data_key="customer", model=Customer, archived_endpoint="customers_archived"
)
PROJECTS = Resource(
    endpoint="projects", data_key="project", model=Project, archived_endpoint="projects_archived"
)
SERVICES = Resource(
    endpoint="services", data_key="service", model=Service, archived_endpoint="services_archived"
)
USERS = Resource(endpoint="users", data_key="user", model=User, archived_endpoint="users_archived")
