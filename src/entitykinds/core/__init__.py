"""Core functionalities: registry, factory and the entity surface they rely on.

Architecture Note:
    core/ holds the kind registry and the factory built on it, plus the
    Entity base class and protocols describing what the factory needs from
    registered types. Environment-driven settings live in config/, system
    kinds in builtins/.
"""

from entitykinds.core.entity import (
    DirtyState,
    Entity,
    PopulatesDefaults,
    ReferenceTarget,
    entity_kind,
)
from entitykinds.core.factory import (
    ConstructionInvariantError,
    ConstructionMode,
    InstanceFactory,
    create_fresh,
    create_reference,
)
from entitykinds.core.identity import ObjectRef
from entitykinds.core.registry import (
    ConflictPolicy,
    RegistrationError,
    RegistryChange,
    RegistryListener,
    TypeDescriptor,
    TypeRegistry,
    UnregisteredTypeError,
    declared_kind,
    get_registry,
    has_zero_arg_constructor,
    reset_registry,
)

__all__ = [
    # Identity
    "ObjectRef",
    # Entity
    "Entity",
    "entity_kind",
    "DirtyState",
    "PopulatesDefaults",
    "ReferenceTarget",
    # Registry
    "TypeRegistry",
    "TypeDescriptor",
    "RegistryChange",
    "RegistryListener",
    "ConflictPolicy",
    "RegistrationError",
    "UnregisteredTypeError",
    "declared_kind",
    "has_zero_arg_constructor",
    "get_registry",
    "reset_registry",
    # Factory
    "InstanceFactory",
    "ConstructionMode",
    "ConstructionInvariantError",
    "create_fresh",
    "create_reference",
]
