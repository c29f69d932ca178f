"""Entity base class and kind declaration decorator.

Usage:
    @entity_kind("Person")
    class Person(Entity):
        @property
        def nickname(self) -> str | None:
            return self.get("nickname")

        @nickname.setter
        def nickname(self, value: str) -> None:
            self.put("nickname", value)

        def set_default_values(self) -> None:
            self.nickname = "The Flash"

    get_registry().register(Person)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from entitykinds.core.entity.models import DirtyState
from entitykinds.core.identity import ObjectRef


class Entity:
    """Field container that tracks local modifications.

    Subclasses must keep their constructor free of field writes: the factory
    builds reference-only instances through the same constructor and rejects
    any that come out dirty. Put default values in `set_default_values`.
    """

    __entity_kind__: ClassVar[str | None] = None

    def __init__(self, kind: str | None = None) -> None:
        """Initialize an empty, new entity.

        Args:
            kind: Kind name. Defaults to the kind declared on the class.

        Raises:
            ValueError: If no kind is available, or it contradicts the declared one.
        """
        declared = type(self).__entity_kind__
        if kind is None:
            kind = declared
        if not kind:
            raise ValueError(
                f"{type(self).__qualname__} has no kind. "
                f"Pass one or declare it with @entity_kind."
            )
        if declared is not None and kind != declared:
            raise ValueError(
                f"{type(self).__qualname__} is declared as {declared!r}, not {kind!r}"
            )
        self._kind = kind
        self._object_id: str | None = None
        self._is_new = True
        self._fields: dict[str, Any] = {}
        self._dirty_keys: set[str] = set()

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def object_id(self) -> str | None:
        """Server-assigned id, None for entities that only exist locally."""
        return self._object_id

    @property
    def is_new(self) -> bool:
        """True until the entity is known to exist remotely."""
        return self._is_new

    @property
    def dirty_state(self) -> DirtyState:
        return DirtyState.DIRTY if self._dirty_keys else DirtyState.CLEAN

    def is_dirty(self, key: str | None = None) -> bool:
        """Check for unsaved local changes.

        Args:
            key: Restrict the check to one field. None checks the whole entity.

        Returns:
            True if the entity (or the given field) has local modifications.
        """
        if key is None:
            return bool(self._dirty_keys)
        return key in self._dirty_keys

    def dirty_keys(self) -> frozenset[str]:
        return frozenset(self._dirty_keys)

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def put(self, key: str, value: Any) -> None:
        """Set a field value and mark it dirty.

        Raises:
            TypeError: If key is not a string.
            ValueError: If key is empty or value is None.
        """
        if not isinstance(key, str):
            raise TypeError(f"Field names must be strings, got {type(key).__name__}")
        if not key:
            raise ValueError("Field names must be non-empty")
        if value is None:
            raise ValueError(f"Cannot set {key!r} to None, use remove() instead")
        self._fields[key] = value
        self._dirty_keys.add(key)

    def remove(self, key: str) -> None:
        """Remove a field if present, marking it dirty."""
        if key in self._fields:
            del self._fields[key]
            self._dirty_keys.add(key)

    def keys(self) -> frozenset[str]:
        return frozenset(self._fields)

    def set_default_values(self) -> None:
        """Hook for default field values on brand-new entities. No-op by default."""

    def mark_as_reference(self, object_id: str) -> None:
        """Tag this entity as standing for an existing remote entity."""
        self._object_id = object_id
        self._is_new = False

    def to_ref(self) -> ObjectRef:
        """Build a reference to this entity.

        Raises:
            ValueError: If the entity has no object id yet.
        """
        if self._object_id is None:
            raise ValueError(f"Unsaved {self._kind} has no object id to reference")
        return ObjectRef(kind=self._kind, object_id=self._object_id)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self._fields:
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind!r}, object_id={self._object_id!r}, "
            f"dirty={self.is_dirty()})"
        )


def entity_kind[E: type](name: str, *, register: bool = False) -> Callable[[E], E]:
    """Declare the kind name of a class, optionally registering it.

    Args:
        name: Kind name, e.g. "Person" or "_User".
        register: Also register the class into the process-wide registry.

    Returns:
        Class decorator.

    Raises:
        ValueError: If name is empty.

    Note:
        Subclasses inherit the declared kind, so a specialization of a
        registered class needs no decorator of its own:

        >>> class Employee(Person):
        ...     pass
        >>> get_registry().register(Employee)
    """
    if not name:
        raise ValueError("Kind name must be a non-empty string")

    def decorator(cls: E) -> E:
        cls.__entity_kind__ = name  # type: ignore[attr-defined]
        if register:
            # Late import to avoid circular dependency
            from entitykinds.core.registry import get_registry

            get_registry().register(cls, name)
        return cls

    return decorator
