"""Entity identity models.

Usage:
    ref = ObjectRef(kind="Person", object_id="xWMyZ4YEGZ")
    person = factory.create_from_ref(ref)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ObjectRef:
    """Identifies a remote entity by kind name and server-assigned id."""

    kind: str
    object_id: str

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("ObjectRef kind must be a non-empty string")
        if not self.object_id:
            raise ValueError("ObjectRef object_id must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.kind}:{self.object_id}"
