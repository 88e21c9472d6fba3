"""Clone functionality: capability protocol, decorator and strategies."""

from protoclone.core.clone.core import (
    TypeMismatchError,
    clone,
    clone_as,
    cloneable,
    get_clone_meta,
    is_cloneable,
    narrow,
)
from protoclone.core.clone.models import Cloneable, CloneMeta, CopyDepth
from protoclone.core.clone.operations import (
    clone_deep,
    clone_shallow,
    clone_using_protocol,
)
from protoclone.core.clone.wrapper import Shared, unwrap_value

__all__ = [
    # Models
    "Cloneable",
    "CloneMeta",
    "CopyDepth",
    # Core
    "cloneable",
    "clone",
    "clone_as",
    "narrow",
    "get_clone_meta",
    "is_cloneable",
    "TypeMismatchError",
    # Strategies
    "clone_shallow",
    "clone_deep",
    "clone_using_protocol",
    # Wrappers
    "Shared",
    "unwrap_value",
]
