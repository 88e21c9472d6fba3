"""Core functionalities: stateless protocols and clone primitives.

Architecture Note:
    core/ contains pure, stateless functionality. Cloning never mutates
    the prototype and keeps no state between calls. Concrete records built
    on these primitives live in records/.
"""

from protoclone.core.clone import (
    Cloneable,
    CloneMeta,
    CopyDepth,
    Shared,
    TypeMismatchError,
    clone,
    clone_as,
    clone_deep,
    clone_shallow,
    clone_using_protocol,
    cloneable,
    get_clone_meta,
    is_cloneable,
    narrow,
    unwrap_value,
)
from protoclone.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Clone
    "Cloneable",
    "CloneMeta",
    "CopyDepth",
    "cloneable",
    "clone",
    "clone_as",
    "narrow",
    "get_clone_meta",
    "is_cloneable",
    "TypeMismatchError",
    "clone_shallow",
    "clone_deep",
    "clone_using_protocol",
    "Shared",
    "unwrap_value",
]
