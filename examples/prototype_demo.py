"""Prototype pattern walkthrough.

Demonstrates:
- Hand-written clone on a flat record
- Decorator-provided clone on a Pydantic model
- The shallow copy hazard: a nested location shared with the prototype
- The deep copy fix: a nested location owned by each clone
- Checked narrowing of an untyped clone result
"""

from typing import Any

from protoclone import (
    Location,
    SmartPhone,
    SmartPhoneListing,
    SuperStoreDeep,
    SuperStoreShallow,
    TypeMismatchError,
    clone_as,
)


def phones() -> None:
    print("=== Flat records ===")
    iphone_8 = SmartPhone(
        name="iPhone 8",
        model="8",
        price="599",
        company="Apple",
        battery_life="24 Hrs",
        operating_system="iOS",
        has_eis=False,
    )
    samsung_a71 = iphone_8.clone()
    samsung_a71.name = "Samsung A71"
    print(f"clone: {samsung_a71.name}, prototype: {iphone_8.name}")

    pro = SmartPhoneListing(
        name="iPhone 12 Pro",
        model="12",
        price="1299",
        company="Apple",
        battery_life="24 Hrs",
        operating_system="iOS",
    )
    pro_max = pro.clone()
    pro_max.name = "iPhone 12 Pro Max"
    print(f"clone: {pro_max.name}, prototype: {pro.name}")


def stores() -> None:
    print("\n=== Shallow copy ===")
    best_buy = SuperStoreShallow(name="bestBuy", location=Location(sector="F8", city="Islamabad"))
    save_mart = best_buy.clone()
    save_mart.location.city = "Lahore"
    print(f"clone: {save_mart.location.city}, prototype: {best_buy.location.city}")

    print("\n=== Deep copy ===")
    nike_store = SuperStoreDeep(name="bestBuy", location=Location(sector="F8", city="Islamabad"))
    adidas_store = nike_store.clone()
    adidas_store.location.city = "Lahore"
    print(f"clone: {adidas_store.location.city}, prototype: {nike_store.location.city}")


def narrowing() -> None:
    print("\n=== Narrowing ===")
    prototype: Any = SuperStoreDeep(name="bestBuy", location=Location(sector="F8", city="Islamabad"))
    store = clone_as(prototype, SuperStoreDeep)
    print(f"narrowed to {type(store).__name__}")
    try:
        clone_as(prototype, SuperStoreShallow)
    except TypeMismatchError as e:
        print(f"rejected: {e}")


def main() -> None:
    phones()
    stores()
    narrowing()


if __name__ == "__main__":
    main()
