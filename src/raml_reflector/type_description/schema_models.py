"""Type description entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class GenerationError(Exception):
    """Raised when schema generation cannot complete."""


@dataclass(frozen=True)
class Property:
    """One externally visible property of an inferred type.

    An empty ``name`` marks an anonymous property.
    """

    name: str
    type: str
    description: str = ""

    def to_document(self) -> dict[str, Any]:
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class PrimitiveAlias:
    """Type that degenerates to its single underlying type."""

    type: str

    def to_document(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class ObjectSchema:
    """Object type with named properties in declaration order."""

    properties: tuple[Property, ...] = ()

    def to_document(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {prop.name: prop.to_document() for prop in self.properties},
        }


TypeSchema = PrimitiveAlias | ObjectSchema


def schema_from_properties(properties: list[Property]) -> TypeSchema:
    """Collapse a single anonymous property into an alias, otherwise build an object schema."""
    if len(properties) == 1 and not properties[0].name:
        return PrimitiveAlias(type=properties[0].type)
    return ObjectSchema(properties=tuple(properties))
