"""entitykinds: kind registry with specialization resolution.

Usage:
    from entitykinds import Entity, InstanceFactory, TypeRegistry, entity_kind

    @entity_kind("Person")
    class Person(Entity):
        def set_default_values(self) -> None:
            self.put("nickname", "The Flash")

    class Speedster(Person):
        pass

    registry = TypeRegistry()
    registry.register(Person)
    registry.register(Speedster)          # most specialized class wins

    factory = InstanceFactory(registry)
    fresh = factory.create_fresh("Person")                  # Speedster, dirty
    pointer = factory.create_reference("Person", "abc123")  # Speedster, clean
"""

__version__ = "0.1.0"

# Core primitives
from entitykinds.core import (
    ConflictPolicy,
    ConstructionInvariantError,
    DirtyState,
    Entity,
    InstanceFactory,
    ObjectRef,
    RegistrationError,
    RegistryChange,
    TypeDescriptor,
    TypeRegistry,
    UnregisteredTypeError,
    create_fresh,
    create_reference,
    entity_kind,
    get_registry,
    reset_registry,
)

# System kinds
from entitykinds.builtins import (
    CurrentUserStore,
    Installation,
    Role,
    Session,
    User,
)

# Configuration
from entitykinds.config import RegistrySettings

__all__ = [
    # Version
    "__version__",
    # Core
    "Entity",
    "entity_kind",
    "DirtyState",
    "ObjectRef",
    "TypeRegistry",
    "TypeDescriptor",
    "RegistryChange",
    "ConflictPolicy",
    "get_registry",
    "reset_registry",
    "InstanceFactory",
    "create_fresh",
    "create_reference",
    # Errors
    "RegistrationError",
    "UnregisteredTypeError",
    "ConstructionInvariantError",
    # Builtins
    "User",
    "Role",
    "Session",
    "Installation",
    "CurrentUserStore",
    # Config
    "RegistrySettings",
]
