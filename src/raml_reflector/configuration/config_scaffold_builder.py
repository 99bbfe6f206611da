"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "raml-reflector.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for raml-reflector.
# Replace every <REQUIRED> placeholder before running generate.
# Replace <OPTIONAL> placeholders only when your setup needs them.

template:
  # Provide either inline RAML template text or a RAML template path.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

# Example values whose types are merged into the template's types section.
# Each entry is an importable 'module:attribute' reference to a class or an instance.
values:
  - "<REQUIRED>"

# Destination of the merged RAML document. Relative to this file.
output: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generation configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
