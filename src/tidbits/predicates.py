"""Type and value predicates.

Small, side-effect free checks used across the package and exported for
callers: emptiness tests, a structural deep-equality check, and a test for
strings that read as currency amounts.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Set
from datetime import date, time
from typing import Any, TypeGuard

from tidbits.currency.parsing import parse_currency_string


def is_non_empty_string(value: Any, *, trim: bool = True) -> TypeGuard[str]:
    """Return True if ``value`` is a string with at least one character.

    Args:
        value: Anything.
        trim: Ignore leading/trailing whitespace when measuring (default True).
    """
    if not isinstance(value, str):
        return False
    return len(value.strip() if trim else value) > 0


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_empty_value(value: Any) -> bool:
    """Return True for values that carry no content.

    Empty means ``None``, ``False``, ``NaN``, a blank string, or an empty
    list/tuple/set/mapping. ``0`` and ``True`` are not empty.
    """
    if value is None or value is False or _is_nan(value):
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, Set, Mapping)):
        return len(value) == 0
    return False


def is_deep_equal(a: Any, b: Any) -> bool:  # pylint: disable=too-many-return-statements
    """Structurally compare two values.

    Rules:
    - ``NaN`` equals ``NaN``.
    - ``bool`` never equals a number (``True`` is not ``1``).
    - Compiled regexes compare by pattern and flags; dates/times by value.
    - Lists and tuples compare element-wise (and must be the same type).
    - Mappings compare by key set, then value by value.
    - Plain objects of the same class compare by their attributes.

    Example:
        ```py
        >>> is_deep_equal({"a": [1, {"b": float("nan")}]}, {"a": [1, {"b": float("nan")}]})
        True
        ```
    """
    if _is_nan(a) and _is_nan(b):
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, re.Pattern) and isinstance(b, re.Pattern):
        return a.pattern == b.pattern and a.flags == b.flags
    if isinstance(a, (date, time)) and isinstance(b, (date, time)):
        return type(a) is type(b) and a == b
    if a is b:
        return True

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(is_deep_equal(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(is_deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, (str, bytes)) or isinstance(b, (str, bytes)):
        return type(a) is type(b) and a == b

    if type(a) is type(b) and hasattr(a, "__dict__") and hasattr(b, "__dict__"):
        return is_deep_equal(vars(a), vars(b))

    # numbers (1 == 1.0), sets and everything else
    return bool(a == b)


def is_currency_like(value: Any) -> bool:
    """Return True if ``value`` reads as a currency amount.

    Finite numbers always qualify. Strings qualify when
    ``parse_currency_string`` finds a non-zero amount, or when the trimmed
    text is exactly ``"0"``.

    Example:
        ```py
        >>> is_currency_like("Rp 15.000,21"), is_currency_like("abc")
        (True, False)
        ```
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    if parse_currency_string(value) != 0:
        return True
    return value.strip() == "0"
