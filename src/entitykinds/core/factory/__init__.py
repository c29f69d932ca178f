"""Factory functionality: fresh and reference-only construction by kind name."""

from entitykinds.core.factory.core import InstanceFactory, create_fresh, create_reference
from entitykinds.core.factory.models import ConstructionInvariantError, ConstructionMode

__all__ = [
    # Models
    "ConstructionMode",
    "ConstructionInvariantError",
    # Core
    "InstanceFactory",
    "create_fresh",
    "create_reference",
]
