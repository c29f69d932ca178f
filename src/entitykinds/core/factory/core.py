"""Instance factory: fresh and reference-only construction by kind name.

Usage:
    factory = InstanceFactory(registry)

    person = factory.create_fresh("Person")            # defaults applied, may be dirty
    pointer = factory.create_reference("Person", "xWMyZ4YEGZ")
    assert not pointer.is_dirty()
"""

from __future__ import annotations

import logging
from typing import Any

from entitykinds.core.entity.models import PopulatesDefaults, ReferenceTarget
from entitykinds.core.factory.models import ConstructionInvariantError, ConstructionMode
from entitykinds.core.identity import ObjectRef
from entitykinds.core.registry import (
    TypeDescriptor,
    TypeRegistry,
    UnregisteredTypeError,
    get_registry,
)

logger = logging.getLogger(__name__)


class InstanceFactory:
    """Builds instances of whatever type is active for a kind name.

    The registry is only consulted to resolve the type. Constructors and the
    defaults hook run without any registry lock held.

    Args:
        registry: Registry to resolve kinds from. Defaults to the process-wide one.
    """

    def __init__(self, registry: TypeRegistry | None = None) -> None:
        self._registry = registry if registry is not None else get_registry()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def create_fresh(self, name: str) -> Any:
        """Create a brand-new local instance.

        Calls `set_default_values()` after the constructor when the type
        provides it. The result may be dirty.

        Args:
            name: Kind name to instantiate.

        Returns:
            New instance of the active type for `name`.

        Raises:
            UnregisteredTypeError: If no type is registered for `name`.
        """
        descriptor = self._resolve(name)
        instance = self._construct(descriptor, ConstructionMode.FRESH)
        if isinstance(instance, PopulatesDefaults):
            instance.set_default_values()
        return instance

    def create_reference(self, name: str, remote_id: str) -> Any:
        """Create an instance standing for an existing remote entity.

        No defaults hook runs and no field data is applied. The instance is
        tagged with `remote_id` and is not considered new.

        Args:
            name: Kind name to instantiate.
            remote_id: Server-assigned id of the remote entity.

        Returns:
            Clean instance of the active type for `name`.

        Raises:
            ValueError: If remote_id is not a non-empty string.
            UnregisteredTypeError: If no type is registered for `name`.
            ConstructionInvariantError: If the constructor left the instance
                dirty, or the type cannot act as a reference.
        """
        if not isinstance(remote_id, str) or not remote_id:
            raise ValueError(f"remote_id must be a non-empty string, got {remote_id!r}")

        descriptor = self._resolve(name)
        instance = self._construct(descriptor, ConstructionMode.REFERENCE)
        if not isinstance(instance, ReferenceTarget):
            raise ConstructionInvariantError(
                name,
                descriptor.entity_type,
                "instances must implement is_dirty() and mark_as_reference()",
            )
        if instance.is_dirty():
            raise ConstructionInvariantError(
                name,
                descriptor.entity_type,
                "registered type's constructor performed disallowed side effects",
            )
        instance.mark_as_reference(remote_id)
        return instance

    def create_from_ref(self, ref: ObjectRef) -> Any:
        """Create a reference-only instance from an ObjectRef."""
        return self.create_reference(ref.kind, ref.object_id)

    def _resolve(self, name: str) -> TypeDescriptor:
        descriptor = self._registry.resolve(name)
        if descriptor is None:
            raise UnregisteredTypeError(name)
        return descriptor

    def _construct(self, descriptor: TypeDescriptor, mode: ConstructionMode) -> Any:
        logger.debug("Constructing %s for %r (%s)", descriptor.type_name, descriptor.name, mode.name)
        return descriptor.entity_type()


def create_fresh(name: str) -> Any:
    """Create a brand-new instance of `name` from the process-wide registry."""
    return InstanceFactory().create_fresh(name)


def create_reference(name: str, remote_id: str) -> Any:
    """Create a reference-only instance of `name` from the process-wide registry."""
    return InstanceFactory().create_reference(name, remote_id)
