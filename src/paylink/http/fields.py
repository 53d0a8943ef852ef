"""src/paylink/http/fields.py

Field descriptors for records mapped to query parameters.

A record is any dataclass instance. Each field is described by its type
annotation and by optional metadata:

    ``query``
        Export directive ``"<name>[,<option>...]"``. The only option is
        ``sendzero``, which emits the field even when it holds its zero value.
    ``json``
        Generic name, used when no ``query`` directive is present.
    ``inline``
        When true, a nested record is flattened into the enclosing scope
        instead of being nested under the field key.

Example::

    @dataclass
    class Charge:
        amount: int = query_field("amount,sendzero")
        currency: str = query_field(json="currency", default="thb")
        metadata: Dict[str, str] = field(default_factory=dict)
        internal: str = query_field("-", default="")
"""

import collections.abc
import dataclasses
import math
import struct
import types
import typing
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Dict, List, NewType, Optional, Tuple

from paylink.exceptions import MappingError

__all__ = [
    "SKIP",
    "SEND_ZERO",
    "UInt",
    "Float32",
    "FieldKind",
    "FieldDescriptor",
    "query_field",
    "describe_fields",
    "is_zero",
    "format_value",
    "format_timestamp",
]

SKIP = "-"
SEND_ZERO = "sendzero"

UInt = NewType("UInt", int)
Float32 = NewType("Float32", float)

_MAP_ORIGINS = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)

_UNION_TYPES = (typing.Union, types.UnionType)


class FieldKind(Enum):
    """Semantic kind of a record field."""

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    TIMESTAMP = "timestamp"
    STRING_MAP = "string_map"
    RECORD = "record"


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """
    Resolved metadata of a single record field.

    Attributes:
        name: Dataclass field name.
        key: Resolved parameter key, including the parent prefix.
        kind: Semantic kind, None for skipped fields.
        send_zero: Emit the field even when it holds its zero value.
        optional: Annotation is ``Optional[...]``.
        inline: Nested record is flattened without a key prefix.
        skip: Field is never emitted.
    """

    name: str
    key: str
    kind: Optional[FieldKind] = None
    send_zero: bool = False
    optional: bool = False
    inline: bool = False
    skip: bool = False


def query_field(
    tag: Optional[str] = None,
    *,
    json: Optional[str] = None,
    inline: bool = False,
    **kwargs: Any,
) -> Any:
    """
    Build a dataclass field carrying query mapping metadata.

    Args:
        tag: Export directive, ``"<name>[,<option>...]"``.
        json: Generic name used when ``tag`` is not given.
        inline: Flatten a nested record into the enclosing scope.
        **kwargs: Passed through to ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if tag is not None:
        metadata["query"] = tag
    if json is not None:
        metadata["json"] = json
    if inline:
        metadata["inline"] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def _resolve_key(field: dataclasses.Field, parent: str) -> Tuple[str, List[str]]:
    opts = str(field.metadata.get("query") or "").split(",")
    tag, opts = opts[0], opts[1:]
    if not tag:
        tag = str(field.metadata.get("json") or "").split(",")[0]
    if not tag:
        tag = field.name.lower()

    if tag != SKIP and parent:
        tag = f"{parent}[{tag}]"
    return tag, opts


def _resolve_kind(
    field: dataclasses.Field, hint: Any, record: str
) -> Tuple[FieldKind, bool]:
    optional = False

    if typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]

    if typing.get_origin(hint) in _UNION_TYPES:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) != 1:
            raise MappingError(field.name, "unsupported type.", record)
        hint, optional = args[0], True
        if typing.get_origin(hint) is typing.Annotated:
            hint = typing.get_args(hint)[0]

    if hint is UInt:
        return FieldKind.UINT, optional
    if hint is Float32:
        return FieldKind.FLOAT32, optional

    origin = typing.get_origin(hint) or hint
    if origin in _MAP_ORIGINS:
        args = typing.get_args(hint)
        if len(args) != 2 or args[0] is not str or args[1] is not str:
            raise MappingError(
                field.name,
                "unsupported type. (only Dict[str, str] supported for maps)",
                record,
            )
        return FieldKind.STRING_MAP, optional

    if isinstance(hint, type):
        if issubclass(hint, bool):
            return FieldKind.BOOL, optional
        if issubclass(hint, int):
            return FieldKind.INT, optional
        if issubclass(hint, float):
            return FieldKind.FLOAT64, optional
        if issubclass(hint, str):
            return FieldKind.STRING, optional
        if issubclass(hint, datetime):
            return FieldKind.TIMESTAMP, optional
        if dataclasses.is_dataclass(hint):
            return FieldKind.RECORD, optional

    raise MappingError(field.name, "unsupported type.", record)


def describe_fields(record: Any, parent: str = "") -> List[FieldDescriptor]:
    """
    Describe every field of a dataclass instance, in declaration order.

    Args:
        record: Dataclass instance.
        parent: Key of the enclosing scope, empty at the top level.

    Raises:
        TypeError: If ``record`` is not a dataclass instance.
        MappingError: If a non-skipped field has an unsupported type.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise TypeError(
            f"expected a dataclass instance, got {type(record).__name__}"
        )

    cls = type(record)
    hints = typing.get_type_hints(cls, include_extras=True)
    descriptors = []
    for field in dataclasses.fields(record):
        key, opts = _resolve_key(field, parent)
        if key == SKIP:
            descriptors.append(FieldDescriptor(field.name, key, skip=True))
            continue

        kind, optional = _resolve_kind(field, hints[field.name], cls.__name__)
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                key=key,
                kind=kind,
                send_zero=SEND_ZERO in opts,
                optional=optional,
                inline=bool(field.metadata.get("inline")),
            )
        )
    return descriptors


def _is_zero_timestamp(value: datetime) -> bool:
    # zero is the instant 0001-01-01T00:00:00Z, whatever the offset
    offset = value.utcoffset() or timedelta(0)
    if offset < timedelta(0):
        return False
    return value.replace(tzinfo=None) == datetime.min + offset


def _is_zero_record(value: Any) -> bool:
    for desc in describe_fields(value):
        if desc.skip:
            continue
        item = getattr(value, desc.name)
        if item is None:
            continue
        if desc.optional:
            return False
        if not is_zero(desc.kind, item):
            return False
    return True


_ZERO: Dict[FieldKind, Callable[[Any], bool]] = {
    FieldKind.BOOL: lambda v: not v,
    FieldKind.INT: lambda v: _raw(v) == 0,
    FieldKind.UINT: lambda v: v == 0,
    FieldKind.FLOAT32: lambda v: v == 0,
    FieldKind.FLOAT64: lambda v: v == 0,
    FieldKind.STRING: lambda v: _raw(v) == "",
    FieldKind.TIMESTAMP: _is_zero_timestamp,
    FieldKind.STRING_MAP: lambda v: len(v) == 0,
    FieldKind.RECORD: _is_zero_record,
}


def is_zero(kind: Optional[FieldKind], value: Any) -> bool:
    """Return True if ``value`` is the zero value of ``kind``."""
    if kind is None:
        return value is None
    return _ZERO[kind](value)


def _raw(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.4f}"


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as RFC 3339 with fractional seconds.

    The fraction is trimmed of trailing zeros and dropped when zero. A zero
    UTC offset is written as ``Z``. Naive datetimes are taken as UTC.
    """
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset()
    if not offset:
        return text + "Z"

    seconds = int(offset.total_seconds())
    sign = "+" if seconds >= 0 else "-"
    hours, seconds = divmod(abs(seconds), 3600)
    minutes = seconds // 60
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def format_value(
    desc: FieldDescriptor, value: Any, record: Optional[str] = None
) -> str:
    """
    Convert a scalar field value to its query parameter text.

    Args:
        desc: Descriptor of the field.
        value: Non-None field value.
        record: Name of the record type, used in error messages.

    Raises:
        MappingError: If the value cannot be represented.
    """
    kind = desc.kind
    if kind is FieldKind.BOOL:
        return "true" if value else "false"

    if kind is FieldKind.INT:
        return str(int(_raw(value)))

    if kind is FieldKind.UINT:
        if value < 0:
            raise MappingError(desc.name, "negative value for unsigned type.", record)
        return str(int(value))

    if kind is FieldKind.FLOAT32:
        try:
            single = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError as exc:
            raise MappingError(
                desc.name, "value out of range for float32.", record
            ) from exc
        if math.isinf(single) and math.isfinite(value):
            raise MappingError(desc.name, "value out of range for float32.", record)
        return _format_float(single)

    if kind is FieldKind.FLOAT64:
        return _format_float(float(value))

    if kind is FieldKind.STRING:
        return str(_raw(value))

    if kind is FieldKind.TIMESTAMP:
        if _is_zero_timestamp(value):
            return ""
        return format_timestamp(value)

    raise MappingError(desc.name, "unsupported type.", record)
