"""System kinds: users, roles, sessions and installations."""

from entitykinds.builtins.core import (
    BUILTIN_KINDS,
    CurrentUserStore,
    register_builtin_kinds,
    unregister_builtin_kinds,
)
from entitykinds.builtins.models import Installation, Role, Session, User

__all__ = [
    # Models
    "User",
    "Role",
    "Session",
    "Installation",
    # Core
    "BUILTIN_KINDS",
    "register_builtin_kinds",
    "unregister_builtin_kinds",
    "CurrentUserStore",
]
