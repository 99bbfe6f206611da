"""Merging of inferred types into a RAML template."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, get_origin

import yaml

from raml_reflector.introspection import introspect_type
from raml_reflector.type_description.schema_models import GenerationError
from raml_reflector.type_description.type_registry import TypeRegistry

LOGGER = logging.getLogger(__name__)

RAML_HEADER = "#%RAML 1.0\n"
TYPES_SECTION = "types"


def merge_with_types(template_text: str, *values: Any) -> str:
    """Infer the types of ``values`` and merge them into ``template_text``."""
    return merge_types(template_text, build_types(*values))


def build_types(*values: Any) -> dict[str, dict[str, Any]]:
    """Infer RAML type documents for the given instances or classes.

    Every call walks the values with a fresh registry.
    """
    registry = TypeRegistry()
    for value in values:
        introspect_type(registry, _reflected_type(value))

    return {name: schema.to_document() for name, schema in registry.schemas().items()}


def merge_types(template_text: str, types: Mapping[str, Any]) -> str:
    """Add every type missing from the template's ``types`` section and re-serialize.

    Entries already present in the template are kept as they are. A template
    without a ``types`` section is returned without inferred types.

    Raises:
      GenerationError: If the template cannot be parsed or the result cannot be serialized.
    """
    document = parse_template(template_text)

    template_types = document.get(TYPES_SECTION)
    if template_types is None:
        LOGGER.debug(
            "template has no %s section, discarding %d inferred types", TYPES_SECTION, len(types)
        )
    elif isinstance(template_types, MutableMapping):
        for name, definition in types.items():
            if name in template_types and template_types[name] is not None:
                LOGGER.debug("keeping template definition of %s", name)
                continue
            LOGGER.debug("inserting inferred type %s", name)
            template_types[name] = definition
    else:
        raise GenerationError(f"Template section '{TYPES_SECTION}' must be a mapping.")

    try:
        serialized = yaml.safe_dump(
            document, sort_keys=False, default_flow_style=False, allow_unicode=True
        )
    except yaml.YAMLError as exc:
        raise GenerationError(f"Could not serialize raml document: {exc}") from exc

    return RAML_HEADER + serialized


def parse_template(template_text: str) -> dict[Any, Any]:
    """Parse a RAML template into a mutable document."""
    try:
        parsed = yaml.safe_load(template_text.replace("\t", " "))
    except yaml.YAMLError as exc:
        raise GenerationError(f"Could not parse raml template: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise GenerationError("Raml template root must be a mapping.")
    return parsed


def _reflected_type(value: Any) -> Any:
    if isinstance(value, type) or get_origin(value) is not None:
        return value
    return type(value)
