"""Response normalization: envelope unwrapping and date conversion."""

from datetime import datetime
from typing import Any, Optional, Union

SUCCESS_STATUS = 200

# Only these fields are ever rewritten to datetime values.
DATE_FIELDS = ("created_at", "updated_at", "date_at")

Record = dict[str, Any]


def parse_date(value: Any) -> Any:
    """Parse an ISO 8601 date or timestamp string from the API.

    Non-string values are returned as-is. Malformed strings raise ValueError.
    """
    if not isinstance(value, str):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def convert_dates(record: Record) -> Record:
    """Return a shallow copy of ``record`` with its date fields parsed.

    Only the keys in ``DATE_FIELDS`` are touched and only when their value is
    truthy; every other value is carried over by reference.
    """
    result = dict(record)
    for field in DATE_FIELDS:
        if result.get(field):
            result[field] = parse_date(result[field])
    return result


def unwrap(item: Record, data_key: Optional[str]) -> Optional[Record]:
    """Take the payload out of a ``{data_key: {...}}`` envelope.

    Returns ``None`` when the envelope lacks ``data_key``.
    """
    if data_key is None:
        return item
    return item.get(data_key)


def normalize_response(
    status_code: int,
    result: Any,
    data_key: Optional[str] = None,
    many: bool = False,
) -> Union[list[Record], Record, None]:
    """
    Normalize a parsed API response.

    Args:
        status_code: HTTP status of the response
        result: Parsed JSON body, a single object or a list of objects
        data_key: Envelope key holding the real payload in each object
        many: Whether the caller expects a list

    Returns:
        A list of records when ``many`` is set, otherwise a single record.
        Non-success responses and empty bodies give ``[]`` or ``None``.
        Objects missing the ``data_key`` envelope are left out.
    """
    if status_code != SUCCESS_STATUS or result is None:
        return [] if many else None

    if isinstance(result, list):
        payloads = (unwrap(item, data_key) for item in result)
        records = [convert_dates(payload) for payload in payloads if payload is not None]
        if many:
            return records
        return records[0] if records else None

    payload = unwrap(result, data_key)
    if payload is None:
        return [] if many else None

    record = convert_dates(payload)
    if many:
        return [record]
    return record
