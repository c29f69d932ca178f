"""Kind registry with specialization resolution.

Several classes may compete for one kind name. The most specialized class seen
so far stays active, whatever order the registrations arrive in.

Usage:
    registry = TypeRegistry()
    registry.register(Person, "Person")
    registry.register(Employee, "Person")   # Employee(Person) takes over
    registry.register(Person, "Person")     # accepted, Employee stays active
    registry.resolve("Person").entity_type  # -> Employee

    registry.register(Robot, "Person")      # unrelated -> RegistrationError
"""

from __future__ import annotations

import inspect
import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import replace

from entitykinds.core.registry.models import (
    ConflictPolicy,
    RegistrationError,
    RegistryChange,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)

type RegistryListener = Callable[[RegistryChange], None]


def declared_kind(cls: type) -> str | None:
    """Return the kind name a class declares via `__entity_kind__`, if any."""
    kind = getattr(cls, "__entity_kind__", None)
    if isinstance(kind, str) and kind:
        return kind
    return None


def has_zero_arg_constructor(cls: type) -> bool:
    """Check whether a class can be instantiated as `cls()`.

    Abstract classes and classes whose signature cannot be introspected are
    treated as not constructible.

    Args:
        cls: Class to check.

    Returns:
        True if every constructor parameter is optional, False otherwise.
    """
    if inspect.isabstract(cls):
        return False
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return False
    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


class TypeRegistry:
    """Thread-safe mapping from kind name to the active concrete type.

    Each name slot has its own lock, so registrations for one kind never wait
    on lookups for another. Descriptors are immutable and swapped whole under
    the slot lock, so readers never see a half-updated slot.

    Listeners are called after the slot lock is released, once per change of
    the active descriptor. An exception raised by a listener propagates to the
    caller, but the change it was notified about has already been applied.
    """

    def __init__(self, conflict_policy: ConflictPolicy = ConflictPolicy.ERROR) -> None:
        """Initialize an empty registry.

        Args:
            conflict_policy: How to treat unrelated types competing for one name.
        """
        self._conflict_policy = ConflictPolicy(conflict_policy)
        self._by_name: dict[str, TypeDescriptor] = {}
        self._slot_locks: dict[str, threading.RLock] = {}
        self._guard = threading.Lock()
        self._generations = itertools.count(1)
        self._listeners: list[RegistryListener] = []

    @property
    def conflict_policy(self) -> ConflictPolicy:
        return self._conflict_policy

    @conflict_policy.setter
    def conflict_policy(self, policy: ConflictPolicy) -> None:
        """Change the policy for future registrations. Active descriptors are kept."""
        self._conflict_policy = ConflictPolicy(policy)

    def register(self, entity_type: type, name: str | None = None) -> TypeDescriptor:
        """Register a class under a kind name and return the active descriptor.

        Args:
            entity_type: Class to register. Must be constructible with no arguments.
            name: Kind name. Defaults to the class's declared kind.

        Returns:
            The descriptor active for `name` after the call. This is not the
            new class's descriptor when a more specialized class is already active.

        Raises:
            RegistrationError: If the class has no usable zero-argument
                constructor, no kind name can be determined, the name conflicts
                with the declared kind, or an unrelated class already holds the
                name under the ERROR policy.
        """
        name = self._registration_name(entity_type, name)
        if not has_zero_arg_constructor(entity_type):
            raise RegistrationError(
                f"Cannot register {entity_type.__qualname__} as {name!r}: "
                f"it has no usable zero-argument constructor"
            )

        candidate = TypeDescriptor(
            name=name,
            entity_type=entity_type,
            lineage=entity_type.__mro__,
            generation=0,
        )
        with self._slot_lock(name):
            previous = self._by_name.get(name)
            if previous is not None:
                if previous.entity_type is entity_type:
                    return previous
                if not candidate.specializes(previous):
                    if previous.specializes(candidate):
                        logger.debug(
                            "Keeping %s for %r, %s is less specialized",
                            previous.type_name,
                            name,
                            entity_type.__qualname__,
                        )
                        return previous
                    if self._conflict_policy is ConflictPolicy.ERROR:
                        raise RegistrationError(
                            f"Cannot register {entity_type.__qualname__} as {name!r}: "
                            f"it is unrelated to the registered {previous.entity_type.__qualname__}"
                        )
                    logger.warning(
                        "Replacing %s with unrelated %s for %r",
                        previous.type_name,
                        entity_type.__qualname__,
                        name,
                    )
            current = replace(candidate, generation=next(self._generations))
            self._by_name[name] = current

        logger.debug("Registered %s as %r", current.type_name, name)
        self._notify(RegistryChange(name=name, previous=previous, current=current))
        return current

    def unregister(self, name: str) -> bool:
        """Remove the registration for a kind name.

        Unregistering an unknown name is a no-op. A later `register` for the
        same name behaves as a first registration.

        Returns:
            True if a descriptor was removed, False otherwise.
        """
        lock = self._slot_locks.get(name)
        if lock is None:
            return False
        with lock:
            previous = self._by_name.pop(name, None)
        if previous is None:
            return False

        logger.debug("Unregistered %s from %r", previous.type_name, name)
        self._notify(RegistryChange(name=name, previous=previous, current=None))
        return True

    def resolve(self, name: str) -> TypeDescriptor | None:
        """Get the active descriptor for a kind name.

        Returns:
            The active descriptor, or None if the name is not registered.
        """
        lock = self._slot_locks.get(name)
        if lock is None:
            return None
        with lock:
            return self._by_name.get(name)

    def get_type(self, name: str) -> type | None:
        """Get the active class for a kind name, or None."""
        descriptor = self.resolve(name)
        return descriptor.entity_type if descriptor is not None else None

    def is_registered(self, name: str) -> bool:
        return self.resolve(name) is not None

    def names(self) -> list[str]:
        """Snapshot of the currently registered kind names."""
        return list(self._by_name)

    def clear(self) -> None:
        """Remove every registration, notifying listeners for each."""
        for name in self.names():
            self.unregister(name)

    def add_listener(self, listener: RegistryListener) -> None:
        """Subscribe to changes of active descriptors."""
        with self._guard:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: RegistryListener) -> None:
        """Unsubscribe a listener. Unknown listeners are ignored."""
        with self._guard:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"TypeRegistry(names={sorted(self._by_name)!r})"

    def _registration_name(self, entity_type: type, name: str | None) -> str:
        if not isinstance(entity_type, type):
            raise RegistrationError(f"Expected a class, got {entity_type!r}")
        declared = declared_kind(entity_type)
        if name is None:
            name = declared
        if not isinstance(name, str) or not name:
            raise RegistrationError(
                f"Cannot register {entity_type.__qualname__}: no kind name given "
                f"and none declared. Did you forget @entity_kind?"
            )
        if declared is None and hasattr(entity_type, "__entity_kind__"):
            raise RegistrationError(
                f"Cannot register {entity_type.__qualname__} as {name!r}: "
                f"it cannot be constructed without a declared kind. "
                f"Declare it with @entity_kind({name!r})."
            )
        if declared is not None and declared != name:
            raise RegistrationError(
                f"Cannot register {entity_type.__qualname__} as {name!r}: "
                f"it declares kind {declared!r}"
            )
        return name

    def _slot_lock(self, name: str) -> threading.RLock:
        lock = self._slot_locks.get(name)
        if lock is None:
            with self._guard:
                lock = self._slot_locks.setdefault(name, threading.RLock())
        return lock

    def _notify(self, change: RegistryChange) -> None:
        with self._guard:
            listeners = tuple(self._listeners)
        for listener in listeners:
            listener(change)


# Module-level registry instance, built on first use
_registry: TypeRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> TypeRegistry:
    """Access the process-wide registry, creating it if necessary.

    The registry is configured from RegistrySettings. Built-in kinds are
    registered when `register_builtins` is enabled.

    Returns:
        The process-wide TypeRegistry instance.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = _build_default_registry()
    return _registry


def reset_registry(*, builtins: bool | None = None) -> TypeRegistry:
    """Clear the process-wide registry and rebuild its initial state.

    Settings are read again, so a changed conflict policy takes effect.

    Args:
        builtins: Whether to re-register built-in kinds. Defaults to the
            `register_builtins` setting.

    Returns:
        The process-wide TypeRegistry instance.
    """
    # Late import to avoid circular dependency
    from entitykinds.config import RegistrySettings

    settings = RegistrySettings()
    registry = get_registry()
    registry.clear()
    registry.conflict_policy = ConflictPolicy(settings.conflict_policy)
    if builtins is None:
        builtins = settings.register_builtins
    if builtins:
        _register_builtins(registry)
    return registry


def _build_default_registry() -> TypeRegistry:
    from entitykinds.config import RegistrySettings

    settings = RegistrySettings()
    registry = TypeRegistry(conflict_policy=ConflictPolicy(settings.conflict_policy))
    if settings.register_builtins:
        _register_builtins(registry)
    return registry


def _register_builtins(registry: TypeRegistry) -> None:
    from entitykinds.builtins import register_builtin_kinds

    register_builtin_kinds(registry)
