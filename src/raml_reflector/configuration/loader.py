"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import GenerationConfiguration, TemplateConfig


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationConfiguration:
    """Load and validate the generation configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    template = _parse_template_section(parsed.get("template"), path.parent)
    values = _parse_values_section(parsed.get("values"))
    output_path = _parse_output(parsed.get("output"), path.parent)

    return GenerationConfiguration(
        path=path,
        template=template,
        values=values,
        output_path=output_path,
    )


def _parse_template_section(value: Any, base_path: Path) -> TemplateConfig:
    if isinstance(value, str):
        return _load_template_file(value, base_path)

    section = _require_mapping(value, "template")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Template definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Template inline value must be a string.")
        return TemplateConfig(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Template path must be a string.")
        return _load_template_file(path_value, base_path)
    raise ConfigurationError("Template definition requires either inline or path.")


def _load_template_file(raw_path: str, base_path: Path) -> TemplateConfig:
    template_path = _resolve_path(base_path, raw_path)
    if not template_path.exists():
        raise ConfigurationError(f"Template file not found: {template_path}")
    return TemplateConfig(
        text=template_path.read_text(encoding="utf-8"), source_path=template_path
    )


def _parse_values_section(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'values' is required.")
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("values must be a string or list of strings.")

    references: list[str] = []
    for item in value:
        reference = _require_non_empty_string(item, "values entry")
        if ":" not in reference:
            raise ConfigurationError(
                f"values entry '{reference}' must have the form 'module:attribute'."
            )
        references.append(reference)
    if not references:
        raise ConfigurationError("values must contain at least one entry.")
    return tuple(references)


def _parse_output(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base_path, _require_non_empty_string(value, "output"))


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
