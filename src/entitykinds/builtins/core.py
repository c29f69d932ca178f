"""Registration of system kinds and the current-user cache.

Usage:
    register_builtin_kinds(registry)

    store = CurrentUserStore()
    store.attach(registry)
    store.set(user)
    registry.register(MyUser)   # _User now resolves elsewhere, store is cleared
"""

from __future__ import annotations

import logging
import threading

from entitykinds.builtins.models import Installation, Role, Session, User
from entitykinds.core.registry import RegistryChange, TypeRegistry

logger = logging.getLogger(__name__)

BUILTIN_KINDS: tuple[type, ...] = (User, Role, Session, Installation)


def register_builtin_kinds(registry: TypeRegistry) -> None:
    """Register every system kind that has no registration yet.

    Kinds already resolved to a subclass keep it.
    """
    for cls in BUILTIN_KINDS:
        registry.register(cls)


def unregister_builtin_kinds(registry: TypeRegistry) -> None:
    """Remove the registrations of every system kind name, including subclasses."""
    for cls in BUILTIN_KINDS:
        registry.unregister(cls.__entity_kind__)


class CurrentUserStore:
    """Thread-safe holder for the signed-in user.

    When the class registered for `_User` changes, the cached user may be an
    instance of a class that no longer represents the kind. Attached stores
    drop it so the next lookup loads a user of the active class.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._user: User | None = None

    def get(self) -> User | None:
        with self._lock:
            return self._user

    def set(self, user: User | None) -> None:
        """Replace the cached user.

        Raises:
            TypeError: If user is neither None nor a User.
        """
        if user is not None and not isinstance(user, User):
            raise TypeError(f"Expected a User, got {type(user).__name__}")
        with self._lock:
            self._user = user

    def clear(self) -> None:
        self.set(None)

    def attach(self, registry: TypeRegistry) -> None:
        """Clear this store whenever the registry changes the `_User` kind."""
        registry.add_listener(self._on_registry_change)

    def detach(self, registry: TypeRegistry) -> None:
        registry.remove_listener(self._on_registry_change)

    def _on_registry_change(self, change: RegistryChange) -> None:
        if change.name != User.__entity_kind__:
            return
        logger.debug("Clearing current user after %r registration changed", change.name)
        self.clear()
