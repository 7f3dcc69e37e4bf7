"""Embedded connection-string password masking.

Connection strings such as ``Server=db;User Id=sa;Password=hunter2`` often
end up inside otherwise harmless string values. Only the value of the
``Password=`` segment is replaced; every other segment is kept so the
string stays useful for debugging. ``Password`` must start the value or
follow a ``;`` or whitespace, so ``mypassword=`` inside a token is not a
segment.

Two flavours of the same rule:
- decoded: applied to a Python string (value runs to ``;`` or end of string)
- raw: applied to undecoded JSON text (value also stops at an unescaped
  quote so the surrounding string literal stays intact)
"""
from __future__ import annotations

import re
from typing import Tuple

from jsonscrub.common.codec import encode_string
from jsonscrub.common.keys import DEFAULT_MASK_PATTERN

PASSWORD_SEGMENT = re.compile(r"(?i)(?<![^;\s])(password\s*=\s*)[^;]*")
RAW_PASSWORD_SEGMENT = re.compile(r'(?i)(?<![^;"\s])(password\s*=\s*)(?:[^;"\\]|\\.)*')
# key=value pairs separated by ";" and nothing else
CONNECTION_STRING_SHAPE = re.compile(r"^\s*[^;=]+=[^;]*(?:;(?:\s*[^;=]+=[^;]*)?)*$")


def has_password_segment(value: str) -> bool:
    return PASSWORD_SEGMENT.search(value) is not None


def is_connection_string(value: str) -> bool:
    """True when ``value`` is made only of ``key=value`` segments, one of them a password."""
    return CONNECTION_STRING_SHAPE.match(value) is not None and has_password_segment(value)


def mask_connection_string_with_count(value: str, mask_pattern: str = DEFAULT_MASK_PATTERN) -> Tuple[str, int]:
    """Mask password segments and return (masked_value, segments_masked)."""
    return PASSWORD_SEGMENT.subn(lambda m: m.group(1) + mask_pattern, value)


def mask_connection_string(value: str, mask_pattern: str = DEFAULT_MASK_PATTERN) -> str:
    if not isinstance(value, str):
        return value
    return mask_connection_string_with_count(value, mask_pattern)[0]


def mask_raw_connection_strings_with_count(text: str, mask_pattern: str = DEFAULT_MASK_PATTERN) -> Tuple[str, int]:
    """Raw-text variant: the mask is inserted JSON-escaped (without quotes)."""
    escaped = encode_string(mask_pattern)[1:-1]
    return RAW_PASSWORD_SEGMENT.subn(lambda m: m.group(1) + escaped, text)


__all__ = [
    "has_password_segment",
    "is_connection_string",
    "mask_connection_string",
    "mask_connection_string_with_count",
    "mask_raw_connection_strings_with_count",
]
