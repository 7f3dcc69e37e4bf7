# jsonscrub/formatting/formatter.py
"""
JSON re-formatting.

Re-emits a JSON document in an indented or compact layout. Input that is
None, blank or not valid JSON comes back unchanged, so the functions are
safe to call on arbitrary log payloads.
"""
from __future__ import annotations

import logging
from typing import Optional

from jsonscrub.common.codec import dump_json, parse_json
from jsonscrub.config.settings import settings_or_defaults

log = logging.getLogger(__name__)


def _is_blank(text) -> bool:
    return not isinstance(text, str) or not text.strip()


def format_json(text: Optional[str], indent: bool = True) -> Optional[str]:
    """
    Re-serialize a JSON document.

    Args:
        text: JSON text
        indent: True for the multi-line layout (JSONSCRUB_INDENT spaces per
            level), False for a single line without whitespace

    Returns:
        Formatted JSON, or ``text`` itself when it is blank or malformed
    """
    if _is_blank(text):
        return text

    width = settings_or_defaults().INDENT if indent else None
    try:
        value = parse_json(text)
        return dump_json(value, indent=width)
    except (ValueError, RecursionError) as e:
        # never log the payload itself
        log.debug("format_json passthrough len=%d reason=%s", len(text), type(e).__name__)
        return text


def pretty_print(text: Optional[str]) -> Optional[str]:
    """Format with indentation for readability."""
    return format_json(text, indent=True)


def compact(text: Optional[str]) -> Optional[str]:
    """Format on a single line without insignificant whitespace."""
    return format_json(text, indent=False)


def is_valid_json(text: Optional[str]) -> bool:
    if _is_blank(text):
        return False
    try:
        parse_json(text)
    except ValueError:
        return False
    return True


__all__ = ["format_json", "pretty_print", "compact", "is_valid_json"]
