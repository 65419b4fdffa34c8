"""Locale-agnostic currency parsing and formatting.

``parse_currency_string`` is permissive and never raises; ``format_currency``
validates its options up front and raises on anything it cannot honour.
"""

from .errors import (
    CurrencyError,
    CustomNegativeFormatError,
    InvalidOptionError,
    InvalidValueError,
    PresetNotFoundError,
    UnknownOptionError,
    UnparseableValueError,
)
from .formatting import format_currency
from .options import FormatCurrencyOptions, NegativeFormat, NegativeStyle, RoundingMode
from .parsing import extract_digits, parse_currency_string
from .presets import PRESETS, get_preset

__all__ = [
    "CurrencyError",
    "CustomNegativeFormatError",
    "FormatCurrencyOptions",
    "InvalidOptionError",
    "InvalidValueError",
    "NegativeFormat",
    "NegativeStyle",
    "PRESETS",
    "PresetNotFoundError",
    "RoundingMode",
    "UnknownOptionError",
    "UnparseableValueError",
    "extract_digits",
    "format_currency",
    "get_preset",
    "parse_currency_string",
]
