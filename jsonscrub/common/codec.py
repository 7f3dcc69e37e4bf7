# jsonscrub/common/codec.py
"""
Shared JSON parse/serialize substrate.

- Strict parsing: NaN/Infinity literals are rejected, deep nesting is a
  parse error instead of a RecursionError
- Serialization escapes only what JSON requires (non-ASCII stays as-is)
- Compact layout uses "," and ":" separators; indented layout uses ": "
"""
from __future__ import annotations

import json
from typing import Any, Optional

_COMPACT_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_json(text: str) -> Any:
    """
    Parse JSON text into plain Python values.

    Args:
        text: JSON document

    Returns:
        dict / list / str / int / float / bool / None

    Raises:
        ValueError: malformed input (json.JSONDecodeError is a subclass)
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e


def dump_json(value: Any, indent: Optional[int] = None) -> str:
    """
    Serialize a parsed value.

    Args:
        value: Value produced by parse_json (or a masked copy of one)
        indent: None for a single-line compact layout, else spaces per level

    Raises:
        ValueError: value holds a non-finite float (e.g. 1e400 parsed to inf)
    """
    if indent is None:
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=_COMPACT_SEPARATORS)
    return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=indent)


def encode_string(value: str) -> str:
    """JSON string literal for ``value``, quotes included."""
    return json.dumps(value, ensure_ascii=False)


__all__ = ["parse_json", "dump_json", "encode_string"]
