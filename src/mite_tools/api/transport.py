"""HTTP transport for the mite API."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and parsed JSON body of a GET request."""

    status_code: int
    result: Any = None


class RestTransport:
    """Thin GET-only wrapper around ``httpx.Client``.

    Network errors and undecodable bodies are not caught here.
    """

    def __init__(self, base_url: str, user_agent: str, timeout: float = 30.0):
        self.base_url = base_url
        self.client = httpx.Client(
            base_url=base_url,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            timeout=timeout,
        )

    def get(self, path: str, additional_headers: Optional[dict[str, str]] = None) -> TransportResponse:
        """Issue a GET for ``path`` relative to the base URL.

        ``result`` is only populated for a 200 response with a body.
        """
        response = self.client.get(path, headers=additional_headers)
        logger.debug("GET %s -> %s", response.request.url, response.status_code)

        result = None
        if response.status_code == 200 and response.content:
            result = response.json()

        return TransportResponse(status_code=response.status_code, result=result)

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()
