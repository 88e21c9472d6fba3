"""Clone models: the capability protocol, copy depths and metadata.

Types opt into cloning structurally: anything with a ``clone() -> Self``
method is ``Cloneable``, no shared base class required.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")


class CopyDepth(Enum):
    """How far a clone reaches into the values an instance owns."""

    SHALLOW = "shallow"  # Copy fields, share nested objects
    DEEP = "deep"  # Copy fields, clone every owned nested object

    def get_strategy(self) -> Callable[[T], T]:
        """Get the clone strategy function for this depth.

        Returns:
            Pure function producing a new instance from a prototype.
        """
        # Late import to avoid circular dependency
        from protoclone.core.clone import operations

        strategies = {
            CopyDepth.SHALLOW: operations.clone_shallow,
            CopyDepth.DEEP: operations.clone_deep,
        }
        return strategies[self]

    @classmethod
    def parse(cls, value: CopyDepth | str) -> CopyDepth:
        """Coerce a depth name into a CopyDepth.

        Raises:
            ValueError: If value names no known depth.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            known = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown copy depth {value!r}, expected one of: {known}") from None


@runtime_checkable
class Cloneable(Protocol):
    """One prototype → one new, independent instance of the same type."""

    def clone(self) -> Self: ...


@dataclass(frozen=True, slots=True)
class CloneMeta:
    """Metadata attached to classes decorated with @cloneable."""

    depth: CopyDepth
    type_name: str
