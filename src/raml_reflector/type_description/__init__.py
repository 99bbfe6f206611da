"""Type description exports."""

from .custom_serialization import JSONSerializable, has_custom_serializer
from .field_naming import ResolvedFieldName, resolve_field_name, schema_field
from .primitive_types import is_primitive_type, primitive_type_name
from .schema_models import (
    GenerationError,
    ObjectSchema,
    PrimitiveAlias,
    Property,
    TypeSchema,
    schema_from_properties,
)
from .type_kinds import ResolvedType, TypeKind, resolve_type_kind
from .type_registry import EntryState, TypeRegistry

__all__ = [
    "EntryState",
    "GenerationError",
    "JSONSerializable",
    "ObjectSchema",
    "PrimitiveAlias",
    "Property",
    "ResolvedFieldName",
    "ResolvedType",
    "TypeKind",
    "TypeRegistry",
    "TypeSchema",
    "has_custom_serializer",
    "is_primitive_type",
    "primitive_type_name",
    "resolve_field_name",
    "resolve_type_kind",
    "schema_field",
    "schema_from_properties",
]
