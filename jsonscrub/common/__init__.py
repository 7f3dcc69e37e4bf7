"""
Common utilities shared by the formatter and the masker
"""
from .codec import dump_json, encode_string, parse_json
from .keys import DEFAULT_MASK_PATTERN, DEFAULT_SENSITIVE_KEYS, normalize_keys

__all__ = [
    "DEFAULT_MASK_PATTERN",
    "DEFAULT_SENSITIVE_KEYS",
    "dump_json",
    "encode_string",
    "normalize_keys",
    "parse_json",
]
