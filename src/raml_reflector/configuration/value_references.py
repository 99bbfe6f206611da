"""Resolution of ``module:attribute`` references to example values."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from .loader import ConfigurationError


def resolve_value_reference(reference: str) -> Any:
    """Import ``module`` and return the dotted ``attribute`` path inside it.

    The referenced object may be a class or an instance.
    """
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise ConfigurationError(
            f"Value reference '{reference}' must have the form 'module:attribute'."
        )

    try:
        resolved: Any = importlib.import_module(module_name.strip())
    except Exception as exc:
        raise ConfigurationError(f"Could not import module '{module_name}': {exc}") from exc

    for attribute in attribute_path.strip().split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Value reference '{reference}' does not resolve: missing '{attribute}'."
            ) from exc
    return resolved


def resolve_value_references(
    references: Sequence[str], *, search_paths: Sequence[Path | str] = ()
) -> list[Any]:
    """Resolve every reference, importing modules from ``search_paths`` first."""
    with _prepended_import_paths(search_paths):
        return [resolve_value_reference(reference) for reference in references]


@contextmanager
def _prepended_import_paths(search_paths: Sequence[Path | str]) -> Iterator[None]:
    added = [str(Path(path).resolve()) for path in search_paths]
    sys.path[:0] = added
    try:
        yield
    finally:
        for path in added:
            sys.path.remove(path)
