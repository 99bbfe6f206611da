"""Generation run exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest
from .generation_use_case import GenerationRunError, execute_generation, generate_document

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationRunError",
    "execute_generation",
    "generate_document",
]
