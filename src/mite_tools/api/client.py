"""mite API client."""

import logging
from typing import Any, Optional

from .. import __version__
from ..models import Account, Customer, Project, Service, TimeEntry, User
from . import resources
from .endpoints import endpoint_path
from .normalize import SUCCESS_STATUS, normalize_response
from .query import FilterLike, build_query_string, filter_params
from .resources import Resource
from .transport import RestTransport

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"mite-tools/{__version__}"
BASE_URL_TEMPLATE = "https://{account}.mite.de/"


class MiteClient:
    """Read-only client for the mite API.

    Non-success responses are returned as ``None`` for single items and ``[]``
    for lists. Network errors raised by httpx propagate to the caller. A
    malformed date in any returned record raises ``ValueError`` for the whole
    call, including list calls.
    """

    def __init__(
        self,
        account: str,
        api_key: str,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[RestTransport] = None,
        timeout: float = 30.0,
    ):
        self.account = account
        self.api_key = api_key
        self.base_url = BASE_URL_TEMPLATE.format(account=account)
        self.transport = transport or RestTransport(self.base_url, user_agent, timeout=timeout)

    @property
    def headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {
            "X-MiteAccount": self.account,
            "X-MiteApiKey": self.api_key,
        }

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> "MiteClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get(self, path: str, data_key: str, many: bool) -> Any:
        response = self.transport.get(path, additional_headers=self.headers)
        if response.status_code != SUCCESS_STATUS:
            logger.warning("GET %s returned HTTP %s, treating as no data", path, response.status_code)
        return normalize_response(response.status_code, response.result, data_key, many=many)

    def _fetch_one(self, resource: Resource, resource_id: Optional[int] = None) -> Any:
        """Fetch a single resource and validate it into its model."""
        path = endpoint_path(resource.endpoint, resource_id)
        record = self._get(path, resource.data_key, many=False)
        if record is None:
            return None
        return resource.model.model_validate(record)

    def _fetch_many(
        self,
        resource: Resource,
        filters: Optional[FilterLike] = None,
        archived: bool = False,
    ) -> list[Any]:
        """Fetch a resource collection and validate every item."""
        endpoint = resource.archived_endpoint if archived else resource.endpoint
        path = endpoint_path(endpoint, query=build_query_string(filters))
        records = self._get(path, resource.data_key, many=True)
        return [resource.model.model_validate(record) for record in records]

    def get_account(self) -> Optional[Account]:
        """Get the account the credentials belong to."""
        return self._fetch_one(resources.ACCOUNT)

    def get_myself(self) -> Optional[User]:
        """Get the currently authenticated user."""
        return self._fetch_one(resources.MYSELF)

    def get_time_entries(self, filters: Optional[FilterLike] = None) -> list[TimeEntry]:
        """
        List time entries.

        Args:
            filters: TimeEntriesFilter or a plain mapping of query parameters

        Returns:
            Time entries matching the filters, ``[]`` on a failed request
        """
        return self._fetch_many(resources.TIME_ENTRIES, filters)

    def get_daily_time_entries(self, filters: Optional[FilterLike] = None) -> list[TimeEntry]:
        """List today's time entries. Any ``at`` filter passed in is replaced."""
        return self.get_time_entries({**filter_params(filters), "at": "today"})

    def get_time_entries_of_project(
        self, project_id: int, filters: Optional[FilterLike] = None
    ) -> list[TimeEntry]:
        """List time entries booked on a project."""
        return self.get_time_entries({**filter_params(filters), "project_id": project_id})

    def get_time_entries_of_customer(
        self, customer_id: int, filters: Optional[FilterLike] = None
    ) -> list[TimeEntry]:
        """List time entries booked for a customer."""
        return self.get_time_entries({**filter_params(filters), "customer_id": customer_id})

    def get_time_entry(self, time_entry_id: int) -> Optional[TimeEntry]:
        """Get a time entry by ID.

        There is no lookup by ID here: the unfiltered collection is fetched
        and scanned.
        """
        for entry in self.get_time_entries():
            if entry.id == time_entry_id:
                return entry
        return None

    def get_customers(self) -> list[Customer]:
        """List active customers."""
        return self._fetch_many(resources.CUSTOMERS)

    def get_archived_customers(self) -> list[Customer]:
        """List archived customers."""
        return self._fetch_many(resources.CUSTOMERS, archived=True)

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get a customer by ID."""
        return self._fetch_one(resources.CUSTOMERS, customer_id)

    def get_projects(self) -> list[Project]:
        """List active projects."""
        return self._fetch_many(resources.PROJECTS)

    def get_archived_projects(self) -> list[Project]:
        """List archived projects."""
        return self._fetch_many(resources.PROJECTS, archived=True)

    def get_project(self, project_id: int) -> Optional[Project]:
        """Get a project by ID."""
        return self._fetch_one(resources.PROJECTS, project_id)

    def get_services(self) -> list[Service]:
        """List active services."""
        return self._fetch_many(resources.SERVICES)

    def get_archived_services(self) -> list[Service]:
        """List archived services."""
        return self._fetch_many(resources.SERVICES, archived=True)

    def get_service(self, service_id: int) -> Optional[Service]:
        """Get a service by ID."""
        return self._fetch_one(resources.SERVICES, service_id)

    def get_users(self) -> list[User]:
        """List active users."""
        return self._fetch_many(resources.USERS)

    def get_archived_users(self) -> list[User]:
        """List archived users."""
        return self._fetch_many(resources.USERS, archived=True)

    def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        return self._fetch_one(resources.USERS, user_id)
