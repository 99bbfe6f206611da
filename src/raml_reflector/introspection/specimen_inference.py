"""Schema inference from specimens of custom-serialized types.

Types that own their serialization cannot be described through their
declared fields. A zero-valued specimen is serialized with the type's own
routine, decoded back into a generic document, and the schema is read off
that concrete example. Inference is shallow: nested objects of the example
are described by their kind only.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from datetime import UTC, date, datetime, time
from enum import Enum
from typing import Any, get_origin

from raml_reflector.type_description.custom_serialization import (
    is_date_time_type,
    serialize_with_custom_serializer,
)
from raml_reflector.type_description.primitive_types import (
    is_primitive_type,
    primitive_type_name,
)
from raml_reflector.type_description.schema_models import GenerationError, Property
from raml_reflector.type_description.type_kinds import (
    TypeKind,
    declared_field_types,
    resolve_type_kind,
)

LOGGER = logging.getLogger(__name__)

CANONICAL_INSTANT = datetime(1970, 1, 1, tzinfo=UTC)


def infer_from_custom_serializer(cls: type) -> list[Property]:
    """Infer the properties of ``cls`` from what its serializer produces for a specimen."""
    specimen = instantiate_specimen(cls)
    try:
        encoded = serialize_with_custom_serializer(specimen)
    except Exception as exc:
        raise GenerationError(
            f"Could not serialize {cls.__name__} specimen to json: {exc}"
        ) from exc

    try:
        decoded = json.loads(encoded)
    except (ValueError, TypeError) as exc:
        raise GenerationError(
            f"Could not deserialize {cls.__name__} specimen from json: {exc}"
        ) from exc

    LOGGER.debug("inferring %s from specimen %r", cls.__name__, decoded)
    _, properties = infer_from_example(decoded)
    return properties


def infer_from_example(value: Any) -> tuple[str, list[Property]]:
    """Estimate a type name and its properties from one decoded example value."""
    value_type = type(value)
    if is_primitive_type(value_type):
        name = primitive_type_name(value_type)
        return name, [Property(name="", type=name)]

    if isinstance(value, Mapping):
        properties = [
            Property(name=str(key), type=example_kind_name(item)) for key, item in value.items()
        ]
        return "object", properties

    raise GenerationError(f"Can not build type from example of type: {value_type.__name__}")


def example_kind_name(value: Any) -> str:
    """Name the immediate kind of a decoded value without walking into it."""
    if value is None:
        return "nil"
    if is_primitive_type(type(value)):
        return primitive_type_name(type(value))
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list | tuple):
        return "array"
    raise GenerationError(f"Can not generate a name for the example value: {value!r}")


def instantiate_specimen(cls: type) -> Any:
    """Create a representative instance of ``cls``.

    Date/time types use a canonical instant, enums their first member,
    dataclasses the zero value of every field without a default. Any other
    class is called without arguments.
    """
    if is_date_time_type(cls):
        return _canonical_instant(cls)
    if issubclass(cls, Enum):
        return _first_member(cls)

    try:
        if dataclasses.is_dataclass(cls):
            return cls(**_zero_field_values(cls))
        return cls()
    except GenerationError:
        raise
    except Exception as exc:
        raise GenerationError(f"Could not instantiate a specimen of {cls.__name__}: {exc}") from exc


def zero_value(tp: Any) -> Any:
    resolved = resolve_type_kind(tp)
    if resolved.kind is TypeKind.PRIMITIVE:
        if issubclass(tp, Enum):
            return _first_member(tp)
        return tp()
    if resolved.kind is TypeKind.STRUCTURAL:
        return instantiate_specimen(tp)
    if resolved.kind is TypeKind.COLLECTION:
        origin = get_origin(tp)
        return origin() if origin in (list, tuple, set, frozenset) else []
    if resolved.kind is TypeKind.MAPPING:
        return {}
    return None


def _zero_field_values(cls: type) -> dict[str, Any]:
    field_types = declared_field_types(cls)
    values: dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        if field.default is not dataclasses.MISSING:
            values[field.name] = field.default
        elif field.default_factory is not dataclasses.MISSING:
            values[field.name] = field.default_factory()
        else:
            values[field.name] = zero_value(field_types.get(field.name, Any))
    return values


def _canonical_instant(cls: type) -> Any:
    if issubclass(cls, datetime):
        return cls.fromtimestamp(CANONICAL_INSTANT.timestamp(), tz=UTC)
    if issubclass(cls, date):
        return cls(CANONICAL_INSTANT.year, CANONICAL_INSTANT.month, CANONICAL_INSTANT.day)
    if issubclass(cls, time):
        return cls(0, 0, tzinfo=UTC)
    raise GenerationError(f"Not a date/time type: {cls.__name__}")


def _first_member(cls: type[Enum]) -> Enum:
    members = list(cls)
    if not members:
        raise GenerationError(f"Enum {cls.__name__} has no members to build a specimen from.")
    return members[0]
