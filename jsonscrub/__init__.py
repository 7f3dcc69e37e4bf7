"""
jsonscrub: JSON formatting and sensitive-data masking for log payloads
"""
from .common.keys import DEFAULT_MASK_PATTERN, DEFAULT_SENSITIVE_KEYS
from .config.settings import Settings, get_settings, reload_settings
from .formatting import compact, format_json, is_valid_json, pretty_print
from .masking import (
    JsonMasker,
    MaskingLogFilter,
    build_masker,
    mask_connection_string,
    mask_sensitive_data,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MASK_PATTERN",
    "DEFAULT_SENSITIVE_KEYS",
    "JsonMasker",
    "MaskingLogFilter",
    "Settings",
    "build_masker",
    "compact",
    "format_json",
    "get_settings",
    "is_valid_json",
    "mask_connection_string",
    "mask_sensitive_data",
    "pretty_print",
    "reload_settings",
]
