"""src/paylink/http/marshal.py

Maps user-defined records to query parameters.
"""

import logging
from typing import Any

from paylink.http.fields import FieldKind, describe_fields, format_value, is_zero
from paylink.http.query import QueryParams

__all__ = ["map_query_params", "encode_query_params"]

logger = logging.getLogger(__name__)


def map_query_params(record: Any) -> QueryParams:
    """
    Map a dataclass instance to query parameters.

    Nested records are mapped under ``parent[field]`` keys, inline records
    into the enclosing scope, and ``Dict[str, str]`` fields to one
    ``field[key]`` entry per item.

    Args:
        record: Dataclass instance to map.

    Returns:
        A new QueryParams holding the mapped fields.

    Raises:
        MappingError: If a field has an unsupported type or value.
        TypeError: If ``record`` is not a dataclass instance.
    """
    result = QueryParams()
    _map_record(record, result, "")
    logger.debug(
        "Mapped %s to %d query parameters", type(record).__name__, len(result)
    )
    return result


def encode_query_params(record: Any) -> str:
    """Map a dataclass instance and encode it as a form body."""
    return map_query_params(record).encode()


def _map_record(record: Any, target: QueryParams, parent: str) -> None:
    record_name = type(record).__name__
    for desc in describe_fields(record, parent):
        if desc.skip:
            continue

        value = getattr(record, desc.name)
        if value is None:
            continue

        if is_zero(desc.kind, value) and not desc.send_zero:
            continue

        if desc.kind is FieldKind.STRING_MAP:
            for key, item in value.items():
                target.set(f"{desc.key}[{key}]", str(item))
            continue

        if desc.kind is FieldKind.RECORD:
            _map_record(value, target, "" if desc.inline else desc.key)
            continue

        out = format_value(desc, value, record_name)
        if out:
            target.set(desc.key, out)
