"""Entity models: dirty state and the optional construction protocols.

Registered types do not have to subclass Entity. The factory only relies on
the protocols below, checked structurally at runtime.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol, runtime_checkable


class DirtyState(Enum):
    """Whether an instance carries local changes not yet reconciled remotely."""

    CLEAN = auto()
    DIRTY = auto()


@runtime_checkable
class PopulatesDefaults(Protocol):
    """Fills in default field values on brand-new instances.

    Only called on the fresh construction path, right after the constructor.
    """

    def set_default_values(self) -> None: ...


@runtime_checkable
class ReferenceTarget(Protocol):
    """Can stand in for a remote entity identified by id."""

    def is_dirty(self) -> bool: ...

    def mark_as_reference(self, object_id: str) -> None: ...
