"""Phone number helpers.

``format_phone_number`` groups the digits of a phone number in blocks of four
and optionally prefixes a country code. For countries whose national numbers
carry a leading trunk ``0`` (e.g. Indonesia ``0812...`` -> ``+62 812...``) the
zero is dropped when a country code is given.
"""

from __future__ import annotations

import re
from typing import Any

NON_DIGIT_PATTERN = re.compile(r"\D")
VALID_PHONE_PATTERN = re.compile(r"\+?[0-9\s().-]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
NON_COUNTRY_CHARS_PATTERN = re.compile(r"[^\d+]")

GROUP_SIZE = 4
MAX_DIGITS = 23

# Calling codes whose national format starts with a trunk "0".
TRUNK_PREFIX_COUNTRIES = {
    "7": "Russia, Kazakhstan",
    "27": "South Africa",
    "31": "Netherlands",
    "32": "Belgium",
    "33": "France",
    "34": "Spain",
    "36": "Hungary",
    "39": "Italy, San Marino, Vatican",
    "44": "United Kingdom",
    "46": "Sweden",
    "47": "Norway",
    "48": "Poland",
    "49": "Germany",
    "52": "Mexico",
    "54": "Argentina",
    "55": "Brazil",
    "56": "Chile",
    "61": "Australia",
    "62": "Indonesia",
    "64": "New Zealand",
    "81": "Japan",
    "82": "South Korea",
    "86": "China",
    "90": "Turkey",
    "91": "India",
    "92": "Pakistan",
    "351": "Portugal",
    "352": "Luxembourg",
    "971": "UAE",
}


def _check_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(
            f"'value' must be a str, int or None, got {type(value).__name__}."
        )
    return str(value)


def phone_digits(value: str | int | None) -> str:
    """Return only the digits of ``value`` (``""`` for ``None``)."""
    if (text := _check_value(value)) is None:
        return ""
    return NON_DIGIT_PATTERN.sub("", text)


def is_valid_phone_number(value: str | int | None) -> bool:
    """Return True if ``value`` looks like a phone number.

    Only digits, spaces, ``()``, ``.`` and ``-`` (plus one leading ``+``) are
    allowed, and there must be fewer than 24 digits.
    """
    if (text := _check_value(value)) is None:
        return False
    return bool(VALID_PHONE_PATTERN.fullmatch(text)) and 0 < len(phone_digits(text)) <= MAX_DIGITS


def normalize_country_code(code: str) -> str:
    """Clean a calling code such as ``" ++62 "`` into ``"+62"``."""
    cleaned = NON_COUNTRY_CHARS_PATTERN.sub("", WHITESPACE_PATTERN.sub("", code.strip()))
    if cleaned.startswith("+"):
        cleaned = "+" + cleaned.lstrip("+")
    return cleaned


def format_phone_number(
    value: str | int | None,
    *,
    separator: str = " ",
    plus_country: str = "",
    opening: str = "",
    closing: str = "",
) -> str:
    """Format a phone number into blocks of four digits.

    Args:
        value: The number, in any punctuation.
        separator: Placed between digit blocks (default a space).
        plus_country: Calling code to prefix, e.g. ``"+62"``.
        opening: Text placed before the calling code, e.g. ``"("``.
        closing: Text placed after the calling code, e.g. ``")"``.

    Returns:
        The formatted number, or ``""`` when ``value`` is ``None``.

    Raises:
        TypeError: If ``value`` or any option has the wrong type.

    Example:
        ```py
        >>> format_phone_number("0812-3456-789", plus_country="+62", opening="(", closing=")")
        '(+62) 8123 4567 89'
        ```
    """
    options = {
        "separator": separator,
        "plus_country": plus_country,
        "opening": opening,
        "closing": closing,
    }
    for name, option in options.items():
        if not isinstance(option, str):
            raise TypeError(f"'{name}' must be a str, got {type(option).__name__}.")

    if value is None:
        return ""
    digits = phone_digits(value)

    plus = normalize_country_code(plus_country)
    if NON_DIGIT_PATTERN.sub("", plus) in TRUNK_PREFIX_COUNTRIES and digits.startswith("0"):
        digits = digits[1:]

    grouped = separator.join(
        digits[i : i + GROUP_SIZE] for i in range(0, len(digits), GROUP_SIZE)
    )
    if not plus:
        return grouped

    return f"{opening.strip()}{plus}{closing.strip()} {grouped}"
