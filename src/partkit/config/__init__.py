"""Configuration module using Pydantic Settings.

Usage:
    from partkit.config import get_settings

    if get_settings().check_lens_laws:
        ...
"""

from partkit.config.settings import PartsSettings, configure, get_settings, reset_settings

__all__ = [
    "PartsSettings",
    "get_settings",
    "configure",
    "reset_settings",
]
