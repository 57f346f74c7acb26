"""Endpoint paths for the mite API.

See https://mite.de/api for the full reference.
"""

from typing import Optional

MITE_ENDPOINTS = {
    "account": "account",
    "myself": "myself",
    "time_entries": "time_entries",
    "customers": "customers",
    "customers_archived": "customers/archived",
    "projects": "projects",
    "projects_archived": "projects/archived",
    "services": "services",
    "services_archived": "services/archived",
    "users": "users",
    "users_archived": "users/archived",
}


def endpoint_path(name: str, resource_id: Optional[int] = None, query: str = "") -> str:
    """Build a relative `.json` path for an endpoint, e.g. ``projects/7.json?x=1``."""
    path = MITE_ENDPOINTS[name]
    if resource_id is not None:
        path = f"{path}/{resource_id}"
    return f"{path}.json{query}"
