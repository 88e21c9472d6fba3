"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from protoclone import Location, SmartPhone, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from PROTOCLONE_* variables and cached settings."""
    monkeypatch.delenv("PROTOCLONE_DEFAULT_DEPTH", raising=False)
    monkeypatch.delenv("PROTOCLONE_WARN_ON_ALIAS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def islamabad():
    return Location(sector="F8", city="Islamabad")


@pytest.fixture
def iphone_8():
    return SmartPhone(
        name="iPhone 8",
        model="8",
        price="599",
        company="Apple",
        battery_life="24 Hrs",
        operating_system="iOS",
        has_eis=False,
    )
