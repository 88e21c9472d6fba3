"""Tests for environment-driven clone settings."""

from dataclasses import dataclass

import pytest

from protoclone import CloneSettings, CopyDepth, cloneable, get_clone_meta, get_settings


def test_defaults():
    settings = CloneSettings()

    assert settings.default_depth is CopyDepth.SHALLOW
    assert settings.warn_on_alias is True


def test_explicit_values():
    settings = CloneSettings(default_depth="deep", warn_on_alias=False)

    assert settings.default_depth is CopyDepth.DEEP
    assert settings.warn_on_alias is False


def test_environment_override(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_DEFAULT_DEPTH", "deep")
    monkeypatch.setenv("PROTOCLONE_WARN_ON_ALIAS", "0")

    settings = CloneSettings()

    assert settings.default_depth is CopyDepth.DEEP
    assert settings.warn_on_alias is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_bare_decorator_uses_configured_depth(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_DEFAULT_DEPTH", "deep")
    get_settings.cache_clear()

    @cloneable
    @dataclass
    class Shelf:
        items: list[str]

    shelf = Shelf(["a"])
    copy = shelf.clone()
    copy.items.append("b")

    assert get_clone_meta(Shelf).depth is CopyDepth.DEEP  # type: ignore[union-attr]
    assert shelf.items == ["a"]


def test_invalid_environment_depth_rejected(monkeypatch):
    monkeypatch.setenv("PROTOCLONE_DEFAULT_DEPTH", "medium")

    with pytest.raises(ValueError):
        CloneSettings()


def test_environment_depth_is_case_insensitive(monkeypatch):
    """Environment accepts the same spellings as @cloneable(depth=...)."""
    monkeypatch.setenv("PROTOCLONE_DEFAULT_DEPTH", "DEEP")

    settings = CloneSettings()

    assert settings.default_depth is CopyDepth.DEEP
