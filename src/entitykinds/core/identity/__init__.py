"""Entity identity functionality: references to remote entities."""

from entitykinds.core.identity.models import ObjectRef

__all__ = [
    "ObjectRef",
]
