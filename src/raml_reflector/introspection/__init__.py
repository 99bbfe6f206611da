"""Introspection exports."""

from .specimen_inference import (
    infer_from_custom_serializer,
    infer_from_example,
    instantiate_specimen,
)
from .structural_introspector import introspect_fields, introspect_type

__all__ = [
    "infer_from_custom_serializer",
    "infer_from_example",
    "instantiate_specimen",
    "introspect_fields",
    "introspect_type",
]
