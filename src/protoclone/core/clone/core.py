"""Clone decorator, generic clone entry points and checked narrowing.

Usage:
    @cloneable
    @dataclass
    class Location:
        sector: str
        city: str

    # Nested values are cloned too:
    @cloneable(depth="deep")
    @dataclass
    class Store:
        name: str
        location: Location

    copy = store.clone()
    same_type = clone_as(untyped_prototype, Store)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import is_dataclass
from typing import Any, TypeVar, overload

from protoclone.core.clone.models import Cloneable, CloneMeta, CopyDepth
from protoclone.core.clone.operations import clone_using_protocol, is_pydantic_model

T = TypeVar("T")


class TypeMismatchError(TypeError):
    """Raised when a clone result is narrowed to a type it is not an instance of."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected.__name__} instance, got {actual.__name__}")


@overload
def cloneable(cls: type) -> type: ...


@overload
def cloneable(
    cls: None = None, *, depth: CopyDepth | str | None = None
) -> Callable[[type], type]: ...


def cloneable(
    cls: type | None = None, *, depth: CopyDepth | str | None = None
) -> type | Callable[[type], type]:
    """Give a dataclass or Pydantic model a clone() method.

    Supports three forms:
        @cloneable                    # bare decorator, configured default depth
        @cloneable()                  # parenthesized, no args
        @cloneable(depth="deep")      # factory with args

    Args:
        cls: The class to decorate, or None if called with arguments.
        depth: Copy depth of the generated clone(). None uses
            CloneSettings.default_depth.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model.
        ValueError: If depth names no known copy depth.

    Note:
        A clone() written on the class itself is kept. Apply @cloneable
        AFTER @dataclass:

        >>> @cloneable
        ... @dataclass(slots=True)
        ... class Location:
        ...     city: str
    """
    if depth is None:
        # Late import to avoid circular dependency
        from protoclone.config.settings import get_settings

        resolved = get_settings().default_depth
    else:
        resolved = CopyDepth.parse(depth)

    def decorator(c: type) -> type:
        if not (is_dataclass(c) or is_pydantic_model(c)):
            raise TypeError(
                f"Cloneable {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        c.__clone_meta__ = CloneMeta(  # type: ignore[attr-defined]
            depth=resolved, type_name=f"{c.__module__}.{c.__qualname__}"
        )
        if "clone" not in vars(c):
            strategy = resolved.get_strategy()

            def clone(self: Any) -> Any:
                return strategy(self)

            clone.__doc__ = f"Return a {resolved.value} clone of this instance."
            clone.__qualname__ = f"{c.__qualname__}.clone"
            c.clone = clone  # type: ignore[attr-defined]
        return c

    if cls is None:
        # Called with args: @cloneable() or @cloneable(depth=...)
        return decorator
    else:
        # Called bare: @cloneable
        return decorator(cls)


def get_clone_meta(cls: type) -> CloneMeta | None:
    """Get clone metadata for a class decorated with @cloneable.

    Args:
        cls: Class to look up.

    Returns:
        Clone metadata if decorated, None otherwise.
    """
    return vars(cls).get("__clone_meta__")


def clone[T](obj: T, depth: CopyDepth | str | None = None) -> T:
    """Clone a prototype, returning the same concrete type.

    Args:
        obj: Prototype instance.
        depth: Explicit copy depth. When given, the matching strategy is
            applied to any dataclass, Pydantic model or plain object.
            When None, obj must implement Cloneable.

    Returns:
        New instance, distinct in identity from obj.

    Raises:
        TypeError: If depth is None and obj doesn't implement Cloneable.
        ValueError: If depth names no known copy depth.
    """
    if depth is not None:
        return CopyDepth.parse(depth).get_strategy()(obj)
    return clone_using_protocol(obj)


def narrow[T](value: Any, cls: type[T]) -> T:
    """Checked conversion of a loosely typed clone result.

    Args:
        value: Result to narrow.
        cls: Concrete type the caller expects.

    Returns:
        value itself, typed as cls.

    Raises:
        TypeMismatchError: If value is not an instance of cls.
    """
    if not isinstance(value, cls):
        raise TypeMismatchError(expected=cls, actual=type(value))
    return value


def clone_as[T](obj: Any, cls: type[T]) -> T:
    """Clone through the Cloneable protocol and narrow the result to cls.

    Raises:
        TypeError: If obj doesn't implement Cloneable.
        TypeMismatchError: If the clone is not an instance of cls.
    """
    return narrow(clone_using_protocol(obj), cls)


def is_cloneable(obj: Any) -> bool:
    """Check if an instance offers the clone capability.

    Args:
        obj: Instance to check.

    Returns:
        True if obj is an instance (not a class) with a clone() method.
    """
    return not isinstance(obj, type) and isinstance(obj, Cloneable)
