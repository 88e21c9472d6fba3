"""Pure functions implementing the clone strategies.

These are stateless functions: each takes a prototype and returns a new
instance without touching the prototype.
"""

from __future__ import annotations

import copy
import datetime
import os
import warnings
from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import Any, TypeVar, cast
from uuid import UUID

from protoclone.config.settings import get_settings
from protoclone.core.clone.models import Cloneable
from protoclone.core.clone.wrapper import Shared
from protoclone.core.types import Copy

T = TypeVar("T")

# Values that are immutable or identity-like; reused as-is by deep clones.
_ATOMIC = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    range,
    Enum,
    type,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    Decimal,
    Fraction,
    UUID,
    PurePath,
)

# Warnings point at the first frame outside this package.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def field_names(obj: Any) -> list[str]:
    """Names of the fields a record instance owns.

    Args:
        obj: Dataclass instance, Pydantic model or plain object.

    Returns:
        Declared fields for dataclasses and Pydantic models, instance
        attributes for plain objects, empty list for anything else.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return [f.name for f in fields(obj)]
    if is_pydantic_model(type(obj)):
        return list(type(obj).model_fields)
    if hasattr(obj, "__dict__"):
        return list(vars(obj))
    return []


def _is_record(obj: Any) -> bool:
    if isinstance(obj, _ATOMIC):
        return False
    return (is_dataclass(obj) and not isinstance(obj, type)) or hasattr(obj, "__dict__")


def _is_frozen_dataclass(obj: Any) -> bool:
    return is_dataclass(obj) and not isinstance(obj, type) and obj.__dataclass_params__.frozen


class _DeepCloner:
    """Structural recursion over one prototype's owned values.

    Tracks visited mutable values so a second reference to the same object
    can be reported: the clone receives independent copies for each.
    """

    def __init__(self, warn_on_alias: bool) -> None:
        self._seen: set[int] = set()
        self._warn_on_alias = warn_on_alias

    def clone_record(self, obj: T) -> T:
        names = field_names(obj)
        if not names and not _is_record(obj):
            return cast(T, self.clone_value(obj))

        duplicate = copy.copy(obj)
        # Declared fields first, then attributes set outside them (__post_init__ and the like)
        owned = dict.fromkeys(names)
        if hasattr(duplicate, "__dict__"):
            owned.update(dict.fromkeys(vars(duplicate)))
        for name in owned:
            # object.__setattr__ so frozen dataclasses and models accept the clone
            object.__setattr__(duplicate, name, self.clone_value(getattr(obj, name)))

        if is_pydantic_model(type(obj)):
            for slot in ("__pydantic_private__", "__pydantic_extra__"):
                values = getattr(obj, slot, None)
                if values:
                    cloned = {key: self.clone_value(item) for key, item in values.items()}
                    object.__setattr__(duplicate, slot, cloned)
        return duplicate

    def clone_value(self, value: Any) -> Any:
        if isinstance(value, Shared) or isinstance(value, _ATOMIC):
            return value

        value_type = type(value)
        if value_type is tuple:
            return tuple(self.clone_value(item) for item in value)
        if value_type is frozenset:
            return frozenset(self.clone_value(item) for item in value)

        if not _is_frozen_dataclass(value):
            self._visit(value)
        if isinstance(value, Cloneable):
            return value.clone()
        if value_type is list:
            return [self.clone_value(item) for item in value]
        if value_type is set:
            return {self.clone_value(item) for item in value}
        if value_type is dict:
            return {key: self.clone_value(item) for key, item in value.items()}
        return copy.deepcopy(value)

    def _visit(self, value: Any) -> None:
        key = id(value)
        if key not in self._seen:
            self._seen.add(key)
            return
        if self._warn_on_alias:
            warnings.warn(
                f"{type(value).__name__} instance is reachable more than once. "
                f"The deep clone holds a separate copy for each reference.",
                skip_file_prefixes=(_PACKAGE_DIR + os.sep,),
            )


def clone_shallow(obj: T) -> T:
    """Create a new instance sharing every nested object with the prototype.

    Plain values are copied, references to owned objects are copied as
    references: mutating a nested object through the clone is visible
    through the prototype.

    Args:
        obj: Prototype to clone.

    Returns:
        New instance, distinct in identity from obj.
    """
    return copy.copy(obj)


def clone_deep(obj: T) -> Copy[T]:
    """Create a new instance owning independent copies of every nested value.

    Covers declared fields, other instance attributes, and Pydantic private
    and extra values. Cloneable values are cloned through their own clone(),
    built-in containers are rebuilt element by element, Shared handles and
    immutable values are kept, anything else goes through copy.deepcopy.

    Args:
        obj: Prototype to clone.

    Returns:
        New instance; no mutable state is shared with obj except through
        Shared handles.

    Note:
        No cycle detection. Self-referential graphs recurse without bound.
    """
    cloner = _DeepCloner(warn_on_alias=get_settings().warn_on_alias)
    return cloner.clone_record(obj)


def clone_using_protocol(obj: T) -> T:
    """Clone a prototype using the Cloneable protocol.

    Args:
        obj: Prototype (must implement Cloneable).

    Returns:
        New instance via clone method.

    Raises:
        TypeError: If obj doesn't implement Cloneable.
    """
    if isinstance(obj, type) or not isinstance(obj, Cloneable):
        raise TypeError(f"{type(obj).__name__} does not implement Cloneable protocol")
    return obj.clone()  # type: ignore[return-value]
