"""protoclone: the Prototype pattern with explicit shallow and deep copies.

Usage:
    from dataclasses import dataclass
    from protoclone import cloneable

    @cloneable
    @dataclass
    class Location:
        sector: str
        city: str

    @cloneable(depth="deep")
    @dataclass
    class Store:
        name: str
        location: Location

    prototype = Store("bestBuy", Location("F8", "Islamabad"))
    branch = prototype.clone()
    branch.location.city = "Lahore"  # prototype.location.city is unchanged
"""

__version__ = "0.1.0"

# Core primitives
from protoclone.core import (
    Cloneable,
    CloneMeta,
    Copy,
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

# Configuration
from protoclone.config import CloneSettings, get_settings

# Concrete prototypes
from protoclone.records import (
    Location,
    SmartPhone,
    SmartPhoneListing,
    SuperStoreDeep,
    SuperStoreShallow,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
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
    # Config
    "CloneSettings",
    "get_settings",
    # Records
    "SmartPhone",
    "SmartPhoneListing",
    "Location",
    "SuperStoreShallow",
    "SuperStoreDeep",
]
