"""Schema merging exports."""

from .template_merger import (
    RAML_HEADER,
    build_types,
    merge_types,
    merge_with_types,
    parse_template,
)

__all__ = [
    "RAML_HEADER",
    "build_types",
    "merge_types",
    "merge_with_types",
    "parse_template",
]
