"""String helpers: case conversion and email censoring."""

from .case import (
    capitalize_first,
    capitalize_words,
    slugify,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from .censor import CensorMode, censor_email
from .errors import InvalidCensorModeError, StringsError

__all__ = [
    "CensorMode",
    "InvalidCensorModeError",
    "StringsError",
    "capitalize_first",
    "capitalize_words",
    "censor_email",
    "slugify",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
]
