from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .snapshot import DataSnapshot

T = TypeVar("T")


@dataclass(frozen=True)
class Change(Generic[T]):
    """Before/after states of a mutated resource."""

    before: T
    after: T

    @classmethod
    def from_values(
        cls, before: Any, after: Any, path: str, instance: Optional[str] = None
    ) -> "Change[DataSnapshot]":
        """Build a change of two snapshots taken at the same path."""
        return cls(
            before=DataSnapshot(before, path, instance=instance),
            after=DataSnapshot(after, path, instance=instance),
        )
