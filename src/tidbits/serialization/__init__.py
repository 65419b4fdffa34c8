"""JSON helpers: deterministic stringification and tolerant parsing/cleaning."""

from .cleaning import CleanOptions, clean_parsed_data, parse_custom_date, safe_json_parse
from .stringify import CIRCULAR_MARKER, safe_stable_stringify

__all__ = [
    "CIRCULAR_MARKER",
    "CleanOptions",
    "clean_parsed_data",
    "parse_custom_date",
    "safe_json_parse",
    "safe_stable_stringify",
]
