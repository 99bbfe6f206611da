"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import GenerationConfiguration, TemplateConfig
from .value_references import resolve_value_reference, resolve_value_references

__all__ = [
    "GenerationConfiguration",
    "TemplateConfig",
    "ConfigurationError",
    "load_configuration",
    "resolve_value_reference",
    "resolve_value_references",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
