"""Query string construction for filterable mite endpoints."""

from collections.abc import Mapping
from typing import Any, Optional, Union
from urllib.parse import quote

from ..models import TimeEntriesFilter

FilterLike = Union[TimeEntriesFilter, Mapping[str, Any]]


def filter_params(filters: Optional[FilterLike]) -> dict[str, Any]:
    """Return filters as a plain dict, dropping unset filter model fields."""
    if filters is None:
        return {}
    if isinstance(filters, TimeEntriesFilter):
        return filters.to_params()
    return dict(filters)


def format_value(value: Any) -> str:
    """Stringify a scalar query value.

    Booleans are written in lowercase, the spelling mite expects.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode(value: Any) -> str:
    """Percent-encode a key or formatted value; `None` becomes an empty string."""
    if value is None:
        return ""
    return quote(format_value(value), safe="")


def build_query_string(filters: Optional[FilterLike] = None) -> str:
    """
    Build a query string from a flat filter mapping.

    Args:
        filters: Mapping of parameter names to scalars, lists or nested mappings.
            ``None`` values are skipped.

    Returns:
        ``""`` when nothing remains, otherwise ``?`` followed by ``&``-joined
        expressions. Lists become ``key=a,b,c`` and nested mappings become
        ``key[sub]=value`` pairs. Keys and values are percent-encoded; the
        separators ``,`` ``[`` ``]`` ``=`` ``&`` are not.
    """
    expressions = []

    for key, value in filter_params(filters).items():
        if value is None:
            continue

        name = encode(key)

        if isinstance(value, (list, tuple)):
            expressions.append(f"{name}={','.join(encode(v) for v in value)}")
        elif isinstance(value, Mapping):
            nested = [
                f"{name}[{encode(sub_key)}]={encode(sub_value)}"
                for sub_key, sub_value in value.items()
                if sub_value is not None
            ]
            if nested:
                expressions.append("&".join(nested))
        else:
            expressions.append(f"{name}={encode(value)}")

    if not expressions:
        return ""
    return "?" + "&".join(expressions)
