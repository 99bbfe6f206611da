"""Kind resolution of reflected types."""

from __future__ import annotations

import collections.abc
import dataclasses
import types
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union, get_args, get_origin, get_type_hints

from .custom_serialization import has_custom_serializer
from .primitive_types import is_primitive_type
from .schema_models import GenerationError


class TypeKind(Enum):
    """Closed set of type kinds the reflector can describe."""

    PRIMITIVE = "primitive"
    STRUCTURAL = "structural"
    OPTIONAL = "optional"
    COLLECTION = "collection"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ResolvedType:
    """Kind of a type plus the type the kind refers to.

    ``target`` is the type itself for primitive and structural kinds, the
    referent for optionals, the element type for collections and the value
    type for mappings.
    """

    kind: TypeKind
    target: Any


_COLLECTION_ORIGINS: tuple[Any, ...] = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)
_MAPPING_ORIGINS: tuple[Any, ...] = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)


def resolve_type_kind(tp: Any) -> ResolvedType:
    """Resolve the kind of ``tp`` once so callers can dispatch on it."""
    if is_primitive_type(tp):
        return ResolvedType(TypeKind.PRIMITIVE, tp)
    if is_structural_type(tp):
        return ResolvedType(TypeKind.STRUCTURAL, tp)

    referent = optional_referent(tp)
    if referent is not None:
        return ResolvedType(TypeKind.OPTIONAL, referent)

    origin = get_origin(tp)
    args = get_args(tp)
    if origin in _COLLECTION_ORIGINS and len(args) == 1:
        return ResolvedType(TypeKind.COLLECTION, args[0])
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return ResolvedType(TypeKind.COLLECTION, args[0])
    if origin in _MAPPING_ORIGINS:
        return ResolvedType(TypeKind.MAPPING, args[1] if len(args) == 2 else Any)
    if tp in _MAPPING_ORIGINS:
        return ResolvedType(TypeKind.MAPPING, Any)

    return ResolvedType(TypeKind.UNSUPPORTED, tp)


def is_structural_type(tp: Any) -> bool:
    """Dataclasses and classes owning their serialization are structural."""
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or has_custom_serializer(tp)


def optional_referent(tp: Any) -> Any | None:
    """Return ``T`` for ``Optional[T]``, otherwise ``None``."""
    if get_origin(tp) not in (Union, types.UnionType):
        return None
    args = get_args(tp)
    if type(None) not in args:
        return None
    remaining = [arg for arg in args if arg is not type(None)]
    if len(remaining) != 1:
        return None
    return remaining[0]


def is_optional_type(tp: Any) -> bool:
    return optional_referent(tp) is not None


def declared_field_types(cls: type) -> dict[str, Any]:
    """Resolve the annotations of ``cls``, including string forward references.

    Raises:
      GenerationError: If an annotation cannot be resolved.
    """
    try:
        return get_type_hints(cls)
    except (NameError, TypeError) as exc:
        raise GenerationError(f"Could not resolve field types of {cls.__name__}: {exc}") from exc
