# jsonscrub/config/settings.py
"""
Library settings with Pydantic v2 BaseSettings.

Environment variables with JSONSCRUB_ prefix.
"""
from __future__ import annotations

import logging
from typing import FrozenSet, Optional

from jsonscrub.common.keys import DEFAULT_MASK_PATTERN, DEFAULT_SENSITIVE_KEYS, parse_csv_keys
from jsonscrub.common.pydantic_compat import BaseSettings, Field, ValidationError, field_validator

log = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    """jsonscrub settings."""

    # Formatter
    INDENT: int = Field(default=2, description="Spaces per level for indented output (1-8)")

    # Masker defaults (used when the caller passes None)
    MASK_PATTERN: str = DEFAULT_MASK_PATTERN
    SENSITIVE_KEYS: str = Field(
        default=",".join(sorted(DEFAULT_SENSITIVE_KEYS)),
        description="Comma-separated property names masked case-insensitively",
    )

    # Logging
    FALLBACK_LOG_LEVEL: str = "DEBUG"  # DEBUG|INFO|WARNING|ERROR

    @field_validator("INDENT")
    @classmethod
    def _check_indent(cls, v: int) -> int:
        if not 1 <= v <= 8:
            raise ValueError(f"INDENT must be between 1 and 8, got {v}")
        return v

    @field_validator("FALLBACK_LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"FALLBACK_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    # Helpers
    def get_sensitive_keys(self) -> FrozenSet[str]:
        """Parse SENSITIVE_KEYS into a lowercase set."""
        return parse_csv_keys(self.SENSITIVE_KEYS)

    def get_fallback_log_level(self) -> int:
        return getattr(logging, self.FALLBACK_LOG_LEVEL)


# Lazy singleton
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings, built from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild settings from the current environment (clears the cache)."""
    global _settings
    _settings = None
    return get_settings()


def settings_or_defaults() -> Settings:
    """
    Settings for the transform functions, which must not raise.

    An invalid JSONSCRUB_ variable is logged and the built-in defaults are
    used for the call. Nothing is cached, so a fixed environment takes
    effect on the next call.
    """
    try:
        return get_settings()
    except ValidationError as e:
        log.warning("invalid JSONSCRUB_ settings, using defaults errors=%d", e.error_count())
        return Settings.model_construct()


__all__ = ['Settings', 'get_settings', 'reload_settings', 'settings_or_defaults']
