"""Concrete prototypes: flat device records and composite store records."""

from protoclone.records.device import SmartPhone, SmartPhoneListing
from protoclone.records.store import Location, SuperStoreDeep, SuperStoreShallow

__all__ = [
    "SmartPhone",
    "SmartPhoneListing",
    "Location",
    "SuperStoreShallow",
    "SuperStoreDeep",
]
