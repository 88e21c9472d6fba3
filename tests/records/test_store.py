"""Tests for shallow and deep store clones."""

from dataclasses import asdict

from protoclone import Location, SuperStoreDeep, SuperStoreShallow


class TestShallowStore:
    def test_clone_shares_location(self, islamabad):
        """CRITICAL: Shallow clone copies the reference, not the location.

        Why: This is the hazard the shallow variant exists to document.
        """
        best_buy = SuperStoreShallow(name="bestBuy", location=islamabad)

        save_mart = best_buy.clone()

        assert save_mart is not best_buy
        assert save_mart.location is best_buy.location

    def test_mutating_clone_location_shows_through_prototype(self, islamabad):
        best_buy = SuperStoreShallow(name="bestBuy", location=islamabad)
        save_mart = best_buy.clone()

        save_mart.location.city = "Lahore"

        assert best_buy.location.city == "Lahore"
        assert save_mart.location.city == "Lahore"

    def test_mutating_prototype_location_shows_through_clone(self, islamabad):
        best_buy = SuperStoreShallow(name="bestBuy", location=islamabad)
        save_mart = best_buy.clone()

        best_buy.location.sector = "G9"

        assert save_mart.location.sector == "G9"

    def test_name_is_copied_by_value(self, islamabad):
        best_buy = SuperStoreShallow(name="bestBuy", location=islamabad)
        save_mart = best_buy.clone()

        save_mart.name = "saveMart"

        assert best_buy.name == "bestBuy"


class TestDeepStore:
    def test_clone_owns_new_location(self, islamabad):
        """CRITICAL: Deep clone gives the copy its own location.

        Why: A prototype must be safe to clone and then mutate freely.
        """
        nike = SuperStoreDeep(name="bestBuy", location=islamabad)

        adidas = nike.clone()

        assert adidas.location is not nike.location
        assert adidas.location == nike.location
        assert adidas.name == nike.name

    def test_mutating_clone_location_leaves_prototype(self, islamabad):
        nike = SuperStoreDeep(name="bestBuy", location=islamabad)
        adidas = nike.clone()

        adidas.location.city = "Lahore"

        assert nike.location.city == "Islamabad"
        assert adidas.location.city == "Lahore"

    def test_mutating_prototype_location_leaves_clone(self, islamabad):
        nike = SuperStoreDeep(name="bestBuy", location=islamabad)
        adidas = nike.clone()

        nike.location.sector = "G9"

        assert adidas.location.sector == "F8"

    def test_clones_of_one_prototype_are_independent(self, islamabad):
        nike = SuperStoreDeep(name="bestBuy", location=islamabad)

        first = nike.clone()
        second = nike.clone()

        assert first.location is not second.location
        first.location.city = "Lahore"
        assert second.location.city == "Islamabad"


def test_cloning_never_mutates_prototype():
    """Both variants leave every field of the prototype untouched."""
    for store_cls in (SuperStoreShallow, SuperStoreDeep):
        location = Location(sector="F8", city="Islamabad")
        store = store_cls(name="bestBuy", location=location)
        before = asdict(store)

        store.clone()

        assert asdict(store) == before
        assert store.location is location
