"""Structural introspection of reflected types."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from raml_reflector.type_description.custom_serialization import has_custom_serializer
from raml_reflector.type_description.field_naming import (
    field_description,
    is_embedded_field,
    resolve_field_name,
)
from raml_reflector.type_description.primitive_types import primitive_type_name
from raml_reflector.type_description.schema_models import (
    GenerationError,
    Property,
    schema_from_properties,
)
from raml_reflector.type_description.type_kinds import (
    TypeKind,
    declared_field_types,
    resolve_type_kind,
)
from raml_reflector.type_description.type_registry import EntryState, TypeRegistry

from .specimen_inference import infer_from_custom_serializer

LOGGER = logging.getLogger(__name__)


def introspect_type(registry: TypeRegistry, tp: Any) -> str:
    """Return the schema type name of ``tp``, registering structural types on the way."""
    resolved = resolve_type_kind(tp)

    if resolved.kind is TypeKind.PRIMITIVE:
        return primitive_type_name(tp)
    if resolved.kind is TypeKind.STRUCTURAL:
        return introspect_structural_type(registry, tp)
    if resolved.kind is TypeKind.OPTIONAL:
        return introspect_type(registry, resolved.target)
    if resolved.kind is TypeKind.COLLECTION:
        return introspect_type(registry, resolved.target) + "[]"
    if resolved.kind is TypeKind.MAPPING:
        return "object"

    raise GenerationError(f"Can not generate a name for the type: {_type_label(tp)}")


def introspect_structural_type(registry: TypeRegistry, cls: type) -> str:
    """Register ``cls`` under its declared name unless it is already known."""
    if resolve_type_kind(cls).kind is not TypeKind.STRUCTURAL:
        raise GenerationError(f"Type must be structural but was {_type_label(cls)}")

    type_name = cls.__name__
    if registry.state(type_name) is EntryState.ABSENT:
        registry.reserve(type_name)
        registry.complete(type_name, schema_from_properties(introspect_fields(registry, cls)))

    return type_name


def introspect_fields(
    registry: TypeRegistry, cls: type, *, enclosing: frozenset[type] = frozenset()
) -> list[Property]:
    """Walk the declared fields of ``cls`` into an ordered property list.

    Embedded fields contribute their own properties in place. ``enclosing`` holds
    the types whose fields are currently being expanded into ``cls``.
    """
    if has_custom_serializer(cls):
        return infer_from_custom_serializer(cls)
    if not dataclasses.is_dataclass(cls):
        raise GenerationError(f"Type must be a dataclass but was {_type_label(cls)}")

    field_types = declared_field_types(cls)
    properties: list[Property] = []
    for field in dataclasses.fields(cls):
        field_type = field_types.get(field.name, Any)
        resolved_name = resolve_field_name(field, field_type)
        if resolved_name.skipped:
            continue

        if is_embedded_field(field):
            properties.extend(
                _introspect_embedded_fields(registry, cls, field, field_type, enclosing | {cls})
            )
            continue

        properties.append(
            Property(
                name=resolved_name.name,
                type=introspect_type(registry, field_type),
                description=field_description(field),
            )
        )

    LOGGER.debug("introspected %s with %d properties", cls.__name__, len(properties))
    return properties


def _introspect_embedded_fields(
    registry: TypeRegistry,
    owner: type,
    field: dataclasses.Field[Any],
    field_type: Any,
    enclosing: frozenset[type],
) -> list[Property]:
    resolved = resolve_type_kind(field_type)
    embedded_type = resolved.target if resolved.kind is TypeKind.OPTIONAL else field_type
    if resolve_type_kind(embedded_type).kind is not TypeKind.STRUCTURAL:
        raise GenerationError(
            f"Embedded field {owner.__name__}.{field.name} must be structural "
            f"but was {_type_label(field_type)}"
        )
    if embedded_type in enclosing:
        raise GenerationError(
            f"Embedded field {owner.__name__}.{field.name} embeds its own enclosing type "
            f"{embedded_type.__name__}"
        )
    return introspect_fields(registry, embedded_type, enclosing=enclosing)


def _type_label(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)
