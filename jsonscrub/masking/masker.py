# jsonscrub/masking/masker.py
"""
Sensitive-property masking for JSON text.

A sensitive value is replaced whole, except a connection string, which
keeps its other segments and loses only the password. Strings under other
keys still get their password segments masked.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from jsonscrub.common.codec import dump_json, parse_json
from jsonscrub.common.keys import normalize_keys
from jsonscrub.config.settings import settings_or_defaults

from .connection_string import is_connection_string, mask_connection_string_with_count
from .fallback import compile_key_pattern, mask_raw_text_with_count

log = logging.getLogger(__name__)


class JsonMasker:
    """Masks values of sensitive properties in JSON text or parsed values.

    Keys are matched case-insensitively against the sensitive set; the
    original key casing is kept. Valid JSON goes through a tree walk and is
    re-serialized compactly. Anything that does not parse goes through a
    regex pass over the raw text instead, so callers get a best-effort
    result and never an exception.
    """

    def __init__(
        self,
        *,
        mask_pattern: str | None = None,
        sensitive_keys: Iterable[str] | None = None,
    ) -> None:
        cfg = settings_or_defaults()
        self._mask = str(mask_pattern) if mask_pattern is not None else cfg.MASK_PATTERN
        if sensitive_keys is None:
            self._keys = cfg.get_sensitive_keys()
        else:
            self._keys = normalize_keys(sensitive_keys)
        self._fallback_level = cfg.get_fallback_log_level()
        self._key_pattern = compile_key_pattern(self._keys)

    @property
    def mask_pattern(self) -> str:
        return self._mask

    @property
    def sensitive_keys(self) -> frozenset:
        return self._keys

    def is_sensitive(self, key: Any) -> bool:
        return str(key).lower() in self._keys

    def _mask_field(self, value: Any) -> Tuple[Any, int]:
        # keep connection strings readable, minus the password
        if isinstance(value, str) and is_connection_string(value):
            return mask_connection_string_with_count(value, self._mask)
        return self._mask, 1

    def _walk(self, obj: Any) -> Tuple[Any, int]:
        total = 0

        if isinstance(obj, dict):
            out: Dict[Any, Any] = {}
            for k, v in obj.items():
                if self.is_sensitive(k):
                    vv, c = self._mask_field(v)
                else:
                    vv, c = self._walk(v)
                total += c
                out[k] = vv
            return out, total

        if isinstance(obj, list):
            items: List[Any] = []
            for x in obj:
                xx, c = self._walk(x)
                total += c
                items.append(xx)
            return items, total

        if isinstance(obj, str):
            return mask_connection_string_with_count(obj, self._mask)

        return obj, 0

    def mask_value(self, obj: Any) -> Any:
        """Mask an already-parsed value. Returns a new structure."""
        return self._walk(obj)[0]

    def mask_text_with_count(self, text: str) -> Tuple[str, int]:
        return mask_raw_text_with_count(text, self._key_pattern, self._mask)

    def mask_text(self, text: str) -> str:
        """Regex pass over raw text (the fallback for unparseable input)."""
        if not isinstance(text, str):
            return text
        return self.mask_text_with_count(text)[0]

    def mask_json_with_count(self, text: Optional[str]) -> Tuple[Optional[str], int]:
        """Mask JSON text and return (masked_text, values_masked).

        Args:
            text: JSON text, or anything else (returned unchanged)

        Returns:
            Tuple of (masked text, number of values masked)
        """
        if not isinstance(text, str) or not text.strip():
            return text, 0

        try:
            masked, count = self._walk(parse_json(text))
            return dump_json(masked), count
        except (ValueError, RecursionError) as e:
            log.log(
                self._fallback_level,
                "mask_json regex fallback len=%d reason=%s",
                len(text),
                type(e).__name__,
            )
        return self.mask_text_with_count(text)

    def mask_json(self, text: Optional[str]) -> Optional[str]:
        return self.mask_json_with_count(text)[0]


def build_masker(
    mask_pattern: str | None = None,
    sensitive_keys: Iterable[str] | None = None,
) -> JsonMasker:
    return JsonMasker(mask_pattern=mask_pattern, sensitive_keys=sensitive_keys)


def mask_sensitive_data(
    text: Optional[str],
    mask_pattern: str | None = None,
    sensitive_keys: Iterable[str] | None = None,
) -> Optional[str]:
    """
    Mask values of sensitive properties in JSON text.

    Args:
        text: JSON text (malformed JSON is masked with a regex pass)
        mask_pattern: Replacement value (default JSONSCRUB_MASK_PATTERN)
        sensitive_keys: Property names, matched case-insensitively; replaces
            the default set for this call

    Returns:
        Masked text; None, blank and non-string input comes back unchanged
    """
    return build_masker(mask_pattern, sensitive_keys).mask_json(text)


__all__ = ["JsonMasker", "build_masker", "mask_sensitive_data"]
