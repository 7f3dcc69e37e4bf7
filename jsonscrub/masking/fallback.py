"""Regex masking over raw text, used when the input does not parse as JSON.

Best effort only: it sees ``"key": value`` pairs, not structure, so a
sensitive key holding an object or array is left alone here.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from jsonscrub.common.codec import encode_string
from .connection_string import is_connection_string, mask_raw_connection_strings_with_count

_STRING_LITERAL = r'"(?:[^"\\]|\\.)*"'
_SCALAR_LITERAL = r'-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false'


def compile_key_pattern(keys: Iterable[str]) -> Optional[re.Pattern]:
    """
    Build one case-insensitive pattern for ``"<key>": <literal>`` pairs.

    Group 1 is the quoted key plus separator (kept verbatim, so key casing
    and spacing survive), group 2 is the value literal.
    """
    names = sorted(k for k in keys if k)
    if not names:
        return None
    alternation = "|".join(re.escape(k) for k in names)
    return re.compile(
        r'("(?:%s)"\s*:\s*)(%s|%s)' % (alternation, _STRING_LITERAL, _SCALAR_LITERAL),
        re.IGNORECASE,
    )


def mask_raw_text_with_count(
    text: str,
    key_pattern: Optional[re.Pattern],
    mask_pattern: str,
) -> Tuple[str, int]:
    """Mask raw text and return (masked_text, values_masked).

    Args:
        text: Text that failed to parse as JSON
        key_pattern: Result of compile_key_pattern (None masks no keys)
        mask_pattern: Replacement value

    Returns:
        Tuple of (masked text, number of values masked)
    """
    text, count = mask_raw_connection_strings_with_count(text, mask_pattern)
    if key_pattern is None:
        return text, count

    literal = encode_string(mask_pattern)
    masked = 0

    def replacer(m):
        nonlocal masked
        value = m.group(2)
        # connection string under a sensitive key: its password is already masked
        if value.startswith('"') and is_connection_string(value[1:-1]):
            return m.group(0)
        masked += 1
        return m.group(1) + literal

    text = key_pattern.sub(replacer, text)
    return text, count + masked


__all__ = ["compile_key_pattern", "mask_raw_text_with_count"]
