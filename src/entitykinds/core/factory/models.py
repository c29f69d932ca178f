"""Factory models: construction modes and the reference invariant error."""

from __future__ import annotations

from enum import Enum, auto


class ConstructionMode(Enum):
    """How an instance was requested from the factory."""

    FRESH = auto()  # New local entity, defaults hook applied
    REFERENCE = auto()  # Stand-in for an existing remote entity, must be clean


class ConstructionInvariantError(Exception):
    """Raised when a registered type cannot produce a clean reference instance.

    This points at a defect in the registered type, typically a constructor
    that writes fields. Retrying will not help; fix the type instead.
    """

    def __init__(self, name: str, entity_type: type, reason: str) -> None:
        super().__init__(
            f"Cannot create a reference to {name!r} with {entity_type.__qualname__}: {reason}"
        )
        self.name = name
        self.entity_type = entity_type
