"""
Sensitive-data masking for JSON text
"""
from .connection_string import mask_connection_string
from .log_filter import MaskingLogFilter
from .masker import JsonMasker, build_masker, mask_sensitive_data

__all__ = [
    "JsonMasker",
    "MaskingLogFilter",
    "build_masker",
    "mask_connection_string",
    "mask_sensitive_data",
]
