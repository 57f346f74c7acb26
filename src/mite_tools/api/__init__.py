"""mite API modules."""

from .client import MiteClient
from .normalize import convert_dates, normalize_response
from .query import build_query_string
from .transport import RestTransport, TransportResponse

__all__ = [
    "MiteClient",
    "RestTransport",
    "TransportResponse",
    "build_query_string",
    "convert_dates",
    "normalize_response",
]
