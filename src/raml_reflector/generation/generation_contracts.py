"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one configured generation run."""

    config_path: str
    output_path: str | None = None
    write_output: bool = True


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    document: str
    output_path: Path | None
    type_names: tuple[str, ...]
