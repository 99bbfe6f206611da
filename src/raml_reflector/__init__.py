"""Infer RAML type definitions from Python values and merge them into RAML templates."""

import logging

from .schema_merging import build_types, merge_types, merge_with_types
from .type_description import GenerationError, JSONSerializable, schema_field

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GenerationError",
    "JSONSerializable",
    "build_types",
    "merge_types",
    "merge_with_types",
    "schema_field",
]
