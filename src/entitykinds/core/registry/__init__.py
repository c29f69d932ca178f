"""Registry functionality: kind names, descriptors and specialization resolution."""

from entitykinds.core.registry.core import (
    RegistryListener,
    TypeRegistry,
    declared_kind,
    get_registry,
    has_zero_arg_constructor,
    reset_registry,
)
from entitykinds.core.registry.models import (
    ConflictPolicy,
    RegistrationError,
    RegistryChange,
    TypeDescriptor,
    UnregisteredTypeError,
)

__all__ = [
    # Models
    "ConflictPolicy",
    "RegistryChange",
    "TypeDescriptor",
    # Errors
    "RegistrationError",
    "UnregisteredTypeError",
    # Core
    "TypeRegistry",
    "RegistryListener",
    "declared_kind",
    "has_zero_arg_constructor",
    "get_registry",
    "reset_registry",
]
