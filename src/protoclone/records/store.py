"""Store records: a composite prototype owning a nested location.

The two store variants differ only in copy depth:
    SuperStoreShallow.clone()  # clone.location is store.location
    SuperStoreDeep.clone()     # clone.location is a fresh Location
"""

from __future__ import annotations

from dataclasses import dataclass

from protoclone.core import CopyDepth, cloneable


@cloneable(depth=CopyDepth.SHALLOW)
@dataclass
class Location:
    sector: str
    city: str


@cloneable(depth=CopyDepth.SHALLOW)
@dataclass
class SuperStoreShallow:
    """Store whose clones share one Location with the prototype.

    Mutating the location through any of them is visible through all.
    """

    name: str
    location: Location


@cloneable(depth=CopyDepth.DEEP)
@dataclass
class SuperStoreDeep:
    """Store whose clones each own an independent Location."""

    name: str
    location: Location
