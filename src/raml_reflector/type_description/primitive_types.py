"""Primitive type classification."""

from __future__ import annotations

from typing import Any

from .schema_models import GenerationError

# bool is a subclass of int and has to be checked first.
_PRIMITIVE_NAMES: tuple[tuple[type, str], ...] = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "number"),
    (str, "string"),
)


def is_primitive_type(tp: Any) -> bool:
    """Return whether ``tp`` maps to one of the schema primitives."""
    return isinstance(tp, type) and any(issubclass(tp, base) for base, _ in _PRIMITIVE_NAMES)


def primitive_type_name(tp: Any) -> str:
    """Return the schema primitive name of ``tp``.

    Raises:
      GenerationError: If ``tp`` is not a primitive type.
    """
    if isinstance(tp, type):
        for base, name in _PRIMITIVE_NAMES:
            if issubclass(tp, base):
                return name
    raise GenerationError(f"Not a primitive type: {tp!r}")
