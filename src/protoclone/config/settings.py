"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for cloning.

Usage:
    from protoclone.config import CloneSettings, get_settings

    # Load from environment variables (PROTOCLONE_*)
    settings = get_settings()

    # Or override with explicit values
    settings = CloneSettings(default_depth="deep")
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from protoclone.core.clone.models import CopyDepth


class CloneSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for clone behavior.

    Attributes:
        default_depth: Copy depth of a bare @cloneable decorator.
        warn_on_alias: Warn when a deep clone reaches one object twice.

    Environment Variables:
        PROTOCLONE_DEFAULT_DEPTH
        PROTOCLONE_WARN_ON_ALIAS
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_depth: CopyDepth = CopyDepth.SHALLOW
    warn_on_alias: bool = True

    @field_validator("default_depth", mode="before")
    @classmethod
    def normalize_depth(cls, value: Any) -> Any:
        """Accept depth names in any case, as @cloneable(depth=...) does."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def get_settings() -> CloneSettings:
    """Access the process-wide settings, loaded once.

    Call get_settings.cache_clear() to reload after the environment changes.
    """
    return CloneSettings()
