"""Field name resolution simulating a JSON serializer's naming rules."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .type_kinds import is_optional_type

JSON_NAME_KEY = "json"
DESCRIPTION_KEY = "desc"
EMBED_KEY = "embed"

_EXCLUDED_NAME = "-"
_OPTIONAL_SUFFIX = "?"


@dataclass(frozen=True)
class ResolvedFieldName:
    """Externally visible field name; an empty name means the field is skipped."""

    name: str
    optional: bool = False

    @property
    def skipped(self) -> bool:
        return not self.name


def schema_field(
    *,
    json: str | None = None,
    description: str | None = None,
    embed: bool = False,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field carrying serialization annotations.

    Args:
      json: Serialization name override, ``"name,options"`` style. ``"-"`` excludes the field.
      description: Free-text description of the field.
      embed: Promote the fields of this field's dataclass into the containing type.
      field_kwargs: Passed through to :func:`dataclasses.field`.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if json is not None:
        metadata[JSON_NAME_KEY] = json
    if description is not None:
        metadata[DESCRIPTION_KEY] = description
    if embed:
        metadata[EMBED_KEY] = True
    return dataclasses.field(metadata=metadata, **field_kwargs)


def resolve_field_name(field: dataclasses.Field[Any], field_type: Any) -> ResolvedFieldName:
    """Compute the serialized name of ``field``, or an empty name if it is not serialized."""
    name = field.name
    if name and (name[0].islower() or name[0] == "_"):
        return ResolvedFieldName(name="")

    json_annotation = _annotation(field.metadata, JSON_NAME_KEY)
    if json_annotation:
        tagged_name = json_annotation.split(",", 1)[0]
        if tagged_name in ("", _EXCLUDED_NAME):
            return ResolvedFieldName(name="")
        name = tagged_name

    if is_optional_type(field_type):
        return ResolvedFieldName(name=name + _OPTIONAL_SUFFIX, optional=True)
    return ResolvedFieldName(name=name)


def field_description(field: dataclasses.Field[Any]) -> str:
    return _annotation(field.metadata, DESCRIPTION_KEY)


def is_embedded_field(field: dataclasses.Field[Any]) -> bool:
    return bool(field.metadata.get(EMBED_KEY, False))


def _annotation(metadata: Mapping[str, Any], key: str) -> str:
    value = metadata.get(key)
    if value is None:
        return ""
    return str(value)
