"""Configuration module using Pydantic Settings.

Usage:
    from protoclone.config import CloneSettings, get_settings

    settings = CloneSettings(default_depth="deep", warn_on_alias=False)
"""

from protoclone.config.settings import CloneSettings, get_settings

__all__ = [
    "CloneSettings",
    "get_settings",
]
