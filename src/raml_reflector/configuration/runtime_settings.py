"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TemplateConfig:
    """Normalized RAML template settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class GenerationConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    template: TemplateConfig
    values: tuple[str, ...]
    output_path: Path | None
