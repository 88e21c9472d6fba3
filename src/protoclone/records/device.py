"""Device records: flat prototypes with no nested ownership.

Usage:
    iphone_8 = SmartPhone(name="iPhone 8", model="8", price="599", company="Apple",
                          battery_life="24 Hrs", operating_system="iOS", has_eis=False)
    samsung_a71 = iphone_8.clone()
    samsung_a71.name = "Samsung A71"  # iphone_8.name is still "iPhone 8"
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from protoclone.core import CopyDepth, cloneable


@dataclass(slots=True)
class SmartPhone:
    """Phone descriptor duplicated by a hand-written clone().

    Every field is a plain value, so copying them one by one gives a fully
    independent instance.
    """

    name: str
    model: str
    price: str
    company: str
    battery_life: str
    operating_system: str
    has_eis: bool

    def clone(self) -> SmartPhone:
        return SmartPhone(
            name=self.name,
            model=self.model,
            price=self.price,
            company=self.company,
            battery_life=self.battery_life,
            operating_system=self.operating_system,
            has_eis=self.has_eis,
        )


@cloneable(depth=CopyDepth.SHALLOW)
class SmartPhoneListing(BaseModel):
    """Phone descriptor whose clone() comes from @cloneable."""

    name: str
    model: str
    price: str
    company: str
    battery_life: str
    operating_system: str
    has_eis: bool = False
