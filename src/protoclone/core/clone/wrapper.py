from __future__ import annotations

from typing import Any


class Shared[T]:
    """Handle marking a value as intentionally shared between clones.

    Deep clones keep the handle itself, so every clone reaches the same
    wrapped instance.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def unwrap(self) -> T:
        """Return the wrapped instance."""
        return self._value

    @property
    def value_type(self) -> type[T]:
        """Return the type of the wrapped instance."""
        return type(self._value)

    @property
    def ref_id(self) -> int:
        """Return the identity of the wrapped instance."""
        return id(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shared):
            return NotImplemented
        return self._value is other._value

    def __hash__(self) -> int:
        return hash(self.ref_id)

    def __repr__(self) -> str:
        return f"Shared({self._value!r})"


def unwrap_value(value: Any | Shared[Any]) -> Any:
    """Get the underlying instance, unwrapping if necessary."""
    if isinstance(value, Shared):
        return value.unwrap()
    return value
