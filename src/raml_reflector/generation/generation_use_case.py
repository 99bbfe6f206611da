"""Generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from raml_reflector.configuration import (
    ConfigurationError,
    load_configuration,
    resolve_value_references,
)
from raml_reflector.schema_merging import build_types, merge_types
from raml_reflector.type_description import GenerationError

from .generation_contracts import GenerationOutcome, GenerationRequest

LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation(request: GenerationRequest) -> GenerationOutcome:
    """Run one configured generation and write the merged document when an output is known."""
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise GenerationRunError(str(exc)) from exc

    output_path = (
        Path(request.output_path).resolve() if request.output_path else configuration.output_path
    )
    return generate_document(
        configuration.template.text,
        configuration.values,
        output_path=output_path if request.write_output else None,
        search_paths=(configuration.path.parent,),
    )


def generate_document(
    template_text: str,
    value_references: Sequence[str],
    *,
    output_path: Path | str | None = None,
    search_paths: Sequence[Path | str] = (),
) -> GenerationOutcome:
    """Merge the types of the referenced values into ``template_text``.

    Modules of the references are looked up in ``search_paths`` before
    ``sys.path``. The output file is only written once the whole document was
    generated.
    """
    try:
        values = resolve_value_references(value_references, search_paths=search_paths)
        types = build_types(*values)
        document = merge_types(template_text, types)
    except (ConfigurationError, GenerationError) as exc:
        raise GenerationRunError(str(exc)) from exc
    LOGGER.debug("generated %d types from %d values", len(types), len(values))

    resolved_output = Path(output_path).resolve() if output_path is not None else None
    if resolved_output is not None:
        try:
            resolved_output.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise GenerationRunError(f"Could not write {resolved_output}: {exc}") from exc

    return GenerationOutcome(
        document=document,
        output_path=resolved_output,
        type_names=tuple(types),
    )
