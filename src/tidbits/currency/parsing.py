"""Best-effort parsing of human-written currency strings.

``parse_currency_string`` reads amounts written in any of the common locale
conventions (``"Rp 15.000,21"``, ``"$12,345.60"``, ``"CHF 12'345.60"``,
``"1,23,456.78"``, ``"(1.234,56)"``) without being told which one. It is
permissive by contract: anything it cannot interpret yields ``0.0`` and no
exception is ever raised.

The decimal/grouping disambiguation is a chain of named predicates evaluated
in a fixed order. Indian grouping must be checked before the generic
dot/comma counting, otherwise ``"1,23,456.78"`` would be read as ambiguous
multi-comma grouping.
"""

from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

DECIMAL_MARK = "."
GROUPING_MARKS = (".", ",")

SPACE_CHARS_PATTERN = re.compile("[\u00a0\u202f]")
BRACKETS_PATTERN = re.compile(r"^\(.*\)$", re.DOTALL)
LEADING_SIGN_PATTERN = re.compile(r"^[-\s]+")
TRAILING_NOISE_PATTERN = re.compile(r"[\s.,-]+$")
NEGATIVE_PATTERN = re.compile(r"^[^0-9]*-")
DISALLOWED_CHARS_PATTERN = re.compile(r"[^0-9.,'\s]")
SWISS_AND_SPACE_PATTERN = re.compile(r"[\s']")
INDIAN_GROUP_PATTERN = re.compile(r",[0-9]{2}")
NUMBER_PREFIX_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")
DIGITS_PATTERN = re.compile(r"[0-9]")


# ============================================================================
#                     Separator heuristics (named predicates)
# ============================================================================


def is_indian_grouping(text: str) -> bool:
    """Return True if ``text`` contains two or more ``,dd`` groups (``1,23,456``)."""
    return len(INDIAN_GROUP_PATTERN.findall(text)) > 1


def has_repeated_dots_only(text: str) -> bool:
    """Return True for ``1.121.234``: several dots and no comma, all grouping."""
    return text.count(".") > 1 and "," not in text


def has_repeated_commas_only(text: str) -> bool:
    """Return True for ``1,121,234``: several commas and no dot, all grouping."""
    return text.count(",") > 1 and "." not in text


def has_mixed_separators(text: str) -> bool:
    """Return True if both a dot and a comma appear in ``text``."""
    return "." in text and "," in text


def last_separator(text: str) -> str:
    """Return whichever of ``.``/``,`` occurs last; it is taken as the decimal mark."""
    return "," if text.rfind(",") > text.rfind(".") else "."


def lone_separator_is_decimal(text: str, mark: str) -> bool:
    """Return True if the single ``mark`` in ``text`` is followed by exactly two digits.

    ``"1,23"`` reads as a decimal amount while ``"1,234"`` reads as grouped
    thousands.
    """
    return len(text) - text.rfind(mark) - 1 == 2


def _normalize_separators(text: str) -> str:
    """Strip grouping marks and rewrite the decimal mark (if any) as ``.``."""
    if is_indian_grouping(text):
        logger.debug("Indian grouping detected in %r", text)
        return text.replace(",", "")

    if has_repeated_dots_only(text):
        return text.replace(".", "")

    if has_repeated_commas_only(text):
        return text.replace(",", "")

    if has_mixed_separators(text):
        decimal_mark = last_separator(text)
        grouping_mark = "," if decimal_mark == "." else "."
        logger.debug("Mixed separators in %r, %r is decimal", text, decimal_mark)
        head, _, tail = text.replace(grouping_mark, "").rpartition(decimal_mark)
        return head.replace(decimal_mark, "") + DECIMAL_MARK + tail

    for mark in GROUPING_MARKS:
        if mark in text:
            if lone_separator_is_decimal(text, mark):
                return text.replace(mark, DECIMAL_MARK)
            return text.replace(mark, "")

    return text


def _to_float(text: str) -> float:
    # Reads the longest numeric prefix, like a lenient float parser.
    prefix = NUMBER_PREFIX_PATTERN.match(text)
    number = prefix.group() if prefix else ""
    if not DIGITS_PATTERN.search(number):
        return 0.0
    return float(number)


# ============================================================================
#                               Public API
# ============================================================================


def parse_currency_string(value: Any) -> float:
    """Convert a messy, locale-ambiguous currency string into a float.

    Args:
        value: The text to parse, e.g. ``"Rp 15.000,21"`` or ``"(1,234.56)"``.
            Anything that is not a string is accepted and yields ``0.0``.

    Returns:
        The signed amount. Empty, whitespace-only, non-string or otherwise
        unreadable input returns ``0.0``.

    Examples:
        ```py
        >>> parse_currency_string("1.121.234,56")
        1121234.56
        >>> parse_currency_string("(1.234,56)")
        -1234.56
        >>> parse_currency_string("1,23,456.78")
        123456.78
        ```
    """
    if not isinstance(value, str) or not value.strip():
        return 0.0

    text = SPACE_CHARS_PATTERN.sub("", value.strip())

    # 1) accounting-style negatives: (1.234,56)
    negative = False
    if BRACKETS_PATTERN.match(text):
        negative = True
        text = text[1:-1].strip()

    # 2) collapse leading sign/space, drop trailing punctuation noise
    text = LEADING_SIGN_PATTERN.sub(lambda m: "-" if "-" in m.group() else "", text)
    text = TRAILING_NOISE_PATTERN.sub("", text)
    negative = negative or bool(NEGATIVE_PATTERN.match(text))

    # 3) keep digits and separators only, then drop spaces and Swiss apostrophes
    text = DISALLOWED_CHARS_PATTERN.sub("", text)
    text = SWISS_AND_SPACE_PATTERN.sub("", text)

    number = _to_float(_normalize_separators(text))
    return -number if negative and number else number


def extract_digits(value: Any) -> int:
    """Keep only the ASCII digits of ``value`` and read them as an integer.

    Args:
        value: A string or number; any other type yields ``0``.

    Returns:
        The integer formed by the digits, or ``0`` when there are none.

    Example:
        ```py
        >>> extract_digits("Rp 15.000,21")
        1500021
        ```
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return 0
    digits = "".join(DIGITS_PATTERN.findall(str(value).strip()))
    return int(digits) if digits else 0
