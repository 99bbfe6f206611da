"""Registry of named types built during one generation pass."""

from __future__ import annotations

import logging
from enum import Enum

from .schema_models import GenerationError, ObjectSchema, TypeSchema

LOGGER = logging.getLogger(__name__)


class EntryState(Enum):
    ABSENT = "absent"
    PENDING = "pending"
    COMPLETE = "complete"


class TypeRegistry:
    """Arena of type schemas keyed by type name.

    A name is reserved with an empty placeholder before its fields are walked,
    so self-referential types resolve to the pending entry by name. Completed
    entries are never replaced. A registry belongs to a single generation pass.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, TypeSchema] = {}
        self._pending: set[str] = set()

    def state(self, name: str) -> EntryState:
        if name in self._pending:
            return EntryState.PENDING
        if name in self._schemas:
            return EntryState.COMPLETE
        return EntryState.ABSENT

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def reserve(self, name: str) -> None:
        """Insert a pending placeholder for ``name``."""
        if self.state(name) is not EntryState.ABSENT:
            raise GenerationError(f"Type {name!r} is already registered.")
        LOGGER.debug("reserving type %s", name)
        self._schemas[name] = ObjectSchema()
        self._pending.add(name)

    def complete(self, name: str, schema: TypeSchema) -> None:
        """Replace the placeholder of ``name`` with its final schema."""
        if self.state(name) is not EntryState.PENDING:
            raise GenerationError(f"Type {name!r} has no pending placeholder.")
        self._schemas[name] = schema
        self._pending.discard(name)

    def get(self, name: str) -> TypeSchema | None:
        return self._schemas.get(name)

    def schemas(self) -> dict[str, TypeSchema]:
        """Completed schemas in reservation order."""
        return {name: schema for name, schema in self._schemas.items() if name not in self._pending}
