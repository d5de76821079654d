"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from partkit.config import PartsSettings, configure, get_settings

    # Load from environment variables (PARTKIT_*)
    settings = get_settings()

    # Or override with explicit values, e.g. in a test suite
    configure(check_lens_laws=True, trace_dispatch=True)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PartsSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for embedding and dispatch.

    Attributes:
        check_lens_laws: Verify get(set(m, c)) == m after every embedded update.
        trace_dispatch: Log every dispatched message at DEBUG level.
        max_effect_rounds: Effects a Program performs per run before giving up.

    Environment Variables:
        PARTKIT_CHECK_LENS_LAWS
        PARTKIT_TRACE_DISPATCH
        PARTKIT_MAX_EFFECT_ROUNDS
    """

    model_config = SettingsConfigDict(
        env_prefix="PARTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    check_lens_laws: bool = False
    trace_dispatch: bool = False
    max_effect_rounds: int = Field(default=1000, ge=1)


# Module-level settings instance
_settings: PartsSettings | None = None


def get_settings() -> PartsSettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The cached PartsSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = PartsSettings()
    return _settings


def configure(**overrides: object) -> PartsSettings:
    """Replace the process-wide settings.

    Args:
        overrides: Field values taking precedence over the environment.

    Returns:
        The new PartsSettings instance.
    """
    global _settings
    _settings = PartsSettings(**overrides)  # type: ignore[arg-type]
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next access reloads the environment."""
    global _settings
    _settings = None
