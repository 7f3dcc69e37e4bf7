# jsonscrub/masking/log_filter.py
"""
logging integration.

MaskingLogFilter masks a record before any handler formats it. A record
with args is formatted first and the masked message replaces the template,
so masking never breaks the ``%`` placeholders.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from .masker import JsonMasker

_OWN_LOGGER_PREFIX = "jsonscrub"


class MaskingLogFilter(logging.Filter):
    """logging.Filter that masks JSON payloads in messages and args.

    Attach to a handler (or logger) so records are masked before emission:

        handler.addFilter(MaskingLogFilter())

    Records are never dropped.
    """

    def __init__(
        self,
        *,
        mask_pattern: str | None = None,
        sensitive_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__()
        self.masker = JsonMasker(mask_pattern=mask_pattern, sensitive_keys=sensitive_keys)

    def _mask(self, value: Any) -> Any:
        if isinstance(value, str):
            # scalars like "1e2" would be re-serialized as 100.0
            if value.lstrip()[:1] in ("{", "["):
                return self.masker.mask_json(value)
            return self.masker.mask_text(value)
        if isinstance(value, (dict, list)):
            try:
                return self.masker.mask_value(value)
            except RecursionError:
                return value
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        # the masker logs its own fallback; masking those records would recurse
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(_OWN_LOGGER_PREFIX + "."):
            return True

        if not record.args:
            record.msg = self._mask(record.msg)
            return True

        if isinstance(record.args, dict):
            record.args = {k: self._mask(v) for k, v in record.args.items()}
        else:
            record.args = tuple(self._mask(a) for a in record.args)

        try:
            message = record.getMessage()
        except (TypeError, ValueError, KeyError, RecursionError):
            # unformattable anyway; logging reports it with the masked template
            record.msg = self._mask(record.msg)
            return True

        record.msg = self._mask(message)
        record.args = ()
        return True


__all__ = ["MaskingLogFilter"]
