# jsonscrub/common/keys.py
"""
Built-in mask pattern and sensitive key names, plus key normalization.

Keys are compared lowercased everywhere.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable

DEFAULT_MASK_PATTERN = "***MASKED***"

DEFAULT_SENSITIVE_KEYS: FrozenSet[str] = frozenset(
    {
        "password",
        "pwd",
        "token",
        "secret",
        "apikey",
        "api_key",
        "connectionstring",
        "ssn",
        "creditcard",
        "card",
    }
)


def parse_csv_keys(value: str) -> FrozenSet[str]:
    return frozenset(k.strip().lower() for k in (value or "").split(",") if k.strip())


def normalize_keys(keys: Iterable[str] | str | None) -> FrozenSet[str]:
    """Lowercase a caller-supplied key collection for case-insensitive lookup.

    ``None`` means the built-in defaults. A bare string is read as a
    comma-separated list, so ``"email"`` is one key and not five letters.
    """
    if keys is None:
        return DEFAULT_SENSITIVE_KEYS
    if isinstance(keys, str):
        return parse_csv_keys(keys)
    return frozenset(str(k).strip().lower() for k in keys if str(k).strip())


__all__ = ["DEFAULT_MASK_PATTERN", "DEFAULT_SENSITIVE_KEYS", "normalize_keys", "parse_csv_keys"]
