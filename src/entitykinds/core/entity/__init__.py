"""Entity functionality: dirty-tracking base class, kind decorator and protocols."""

from entitykinds.core.entity.core import Entity, entity_kind
from entitykinds.core.entity.models import (
    DirtyState,
    PopulatesDefaults,
    ReferenceTarget,
)

__all__ = [
    # Models
    "DirtyState",
    "PopulatesDefaults",
    "ReferenceTarget",
    # Core
    "Entity",
    "entity_kind",
]
