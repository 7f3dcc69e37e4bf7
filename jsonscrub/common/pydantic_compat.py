# jsonscrub/common/pydantic_compat.py
"""
Single import point for the pydantic APIs used by jsonscrub.

- BaseSettings with the package-wide config (JSONSCRUB_ prefix, .env)
- field_validator and ValidationError for settings validation
"""
from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings as _BaseSettings, SettingsConfigDict

ENV_PREFIX = "JSONSCRUB_"


class BaseSettings(_BaseSettings):
    """BaseSettings with default config."""
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )


__all__ = [
    'ENV_PREFIX',
    'BaseSettings',
    'Field',
    'ValidationError',
    'field_validator',
]
