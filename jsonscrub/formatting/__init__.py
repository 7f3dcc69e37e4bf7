"""
JSON formatting: indented and compact re-serialization
"""
from .formatter import compact, format_json, is_valid_json, pretty_print

__all__ = ["compact", "format_json", "is_valid_json", "pretty_print"]
