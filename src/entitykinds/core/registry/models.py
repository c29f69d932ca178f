"""Registry models: descriptors, change records, policies and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ConflictPolicy(StrEnum):
    """What to do when an unrelated type is registered under an occupied name."""

    ERROR = "error"
    """Reject the registration with RegistrationError. Default."""

    REPLACE = "replace"
    """Let the newer registration win and log a warning."""


class RegistrationError(Exception):
    """Raised when a type cannot be registered under a kind name.

    The registry is left unchanged when this is raised.
    """

    pass


class UnregisteredTypeError(LookupError):
    """Raised when an instance is requested for a kind with no active type."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"No type is registered for kind {name!r}. "
            f"Register one before creating instances of it."
        )
        self.name = name


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Active registration for a kind name.

    Attributes:
        name: Kind name the type is registered under.
        entity_type: Concrete, zero-argument constructible class.
        lineage: The class MRO, most specific first.
        generation: Registry-wide counter value when this descriptor became active.
    """

    name: str
    entity_type: type
    lineage: tuple[type, ...]
    generation: int

    @property
    def type_name(self) -> str:
        return f"{self.entity_type.__module__}.{self.entity_type.__qualname__}"

    @property
    def depth(self) -> int:
        """Number of ancestors of the registered type."""
        return len(self.lineage) - 1

    def specializes(self, other: TypeDescriptor) -> bool:
        """Check whether this descriptor's type is the other's type or a subclass of it."""
        return issubclass(self.entity_type, other.entity_type)


@dataclass(frozen=True, slots=True)
class RegistryChange:
    """Notification that the active descriptor for a kind changed.

    `previous` is None for a first registration, `current` is None after
    unregistration or clearing.
    """

    name: str
    previous: TypeDescriptor | None
    current: TypeDescriptor | None
