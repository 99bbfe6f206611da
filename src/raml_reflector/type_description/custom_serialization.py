"""Custom serialization capability of reflected types."""

from __future__ import annotations

import json
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Protocol, runtime_checkable

_DATE_TIME_TYPES: tuple[type, ...] = (datetime, date, time)


@runtime_checkable
class JSONSerializable(Protocol):
    """Values that render their own JSON document."""

    def to_json(self) -> str | bytes: ...


def has_custom_serializer(tp: Any) -> bool:
    """Return whether instances of ``tp`` own their serialization."""
    if not isinstance(tp, type):
        return False
    if callable(getattr(tp, "to_json", None)):
        return True
    return issubclass(tp, _DATE_TIME_TYPES) or issubclass(tp, Enum)


def is_date_time_type(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, _DATE_TIME_TYPES)


def serialize_with_custom_serializer(value: Any) -> str | bytes:
    """Invoke the custom serialization routine of ``value``.

    Library exceptions propagate to the caller.
    """
    if isinstance(value, JSONSerializable):
        return value.to_json()
    if isinstance(value, _DATE_TIME_TYPES):
        return json.dumps(value.isoformat())
    if isinstance(value, Enum):
        return json.dumps(value.value)
    raise TypeError(f"{type(value).__name__} has no custom serializer")
