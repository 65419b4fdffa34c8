"""Currency formatting.

``format_currency`` renders a number, or a messy currency string read through
``parse_currency_string``, as a grouped amount with optional decimals, a
currency prefix and a configurable negative style.

Unlike the parser this function is strict: options are validated before any
work is done and unreadable values raise.

Examples:
    ```py
    >>> format_currency(1000000)
    '1.000.000'
    >>> format_currency("-1.121.234,561", decimal=True, suffix_currency="Rp ",
    ...                 rounded_decimal="ceil", negative_format={"style": "brackets"})
    '(Rp 1.121.234,57)'
    >>> format_currency(1234567, indian_format=True)
    '12,34,567'
    ```
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Context,
    Decimal,
)
from typing import Any

from .errors import (
    CustomNegativeFormatError,
    InvalidOptionError,
    InvalidValueError,
    UnparseableValueError,
)
from .options import FormatCurrencyOptions, NegativeFormat, NegativeStyle, RoundingMode
from .parsing import DIGITS_PATTERN, parse_currency_string

logger = logging.getLogger(__name__)

THOUSANDS_PATTERN = re.compile(r"\B(?=(?:[0-9]{3})+(?![0-9]))")
INDIAN_PAIRS_PATTERN = re.compile(r"\B(?=(?:[0-9]{2})+(?![0-9]))")

DECIMAL_ROUNDING = {
    RoundingMode.ROUND: ROUND_HALF_UP,
    RoundingMode.CEIL: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    None: ROUND_DOWN,  # truncate
}


# ============================================================================
#                           Digit-group helpers
# ============================================================================


def group_thousands(digits: str, separator: str) -> str:
    """Insert ``separator`` every three digits from the right (``1.234.567``)."""
    return THOUSANDS_PATTERN.sub(separator, digits)


def group_indian(digits: str, separator: str) -> str:
    """Group the last three digits, then every two digits leftward (``12,34,567``)."""
    last_three, rest = digits[-3:], digits[:-3]
    if not rest:
        return last_three
    return INDIAN_PAIRS_PATTERN.sub(separator, rest) + separator + last_three


def apply_rounding(
    amount: Decimal, total_decimal: int, mode: RoundingMode | None
) -> Decimal:
    """Round a non-negative ``amount`` to ``total_decimal`` places.

    Args:
        amount: The magnitude to round.
        total_decimal: Number of decimal places to keep.
        mode: The rounding mode, or ``None`` to truncate.

    Returns:
        The quantized amount.
    """
    exponent = Decimal(1).scaleb(-total_decimal)
    # enough precision for every integer digit plus the kept decimals
    context = Context(prec=max(28, amount.adjusted() + total_decimal + 2))
    return amount.quantize(exponent, rounding=DECIMAL_ROUNDING[mode], context=context)


# ============================================================================
#                               Internals
# ============================================================================


def _resolve_options(
    options: FormatCurrencyOptions | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> FormatCurrencyOptions:
    if options is None:
        resolved = FormatCurrencyOptions()
    elif isinstance(options, FormatCurrencyOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = FormatCurrencyOptions.from_mapping(options)
    else:
        raise InvalidOptionError(
            "options", "a FormatCurrencyOptions, a mapping or None", options
        )
    return resolved.merged(**overrides)


def _read_amount(value: str | int | float) -> Decimal:
    if isinstance(value, str):
        if not DIGITS_PATTERN.search(value):
            raise UnparseableValueError(value)
        value = parse_currency_string(value)

    if isinstance(value, int):
        return Decimal(value)

    if not math.isfinite(value):
        raise UnparseableValueError(value)
    # shortest repr, so 2.345 is read as 2.345 and not 2.34499999...
    return Decimal(repr(value))


def _style_negative(text: str, negative: NegativeFormat) -> str:
    if negative.custom is not None:
        result = negative.custom(text)
        if not isinstance(result, str):
            raise CustomNegativeFormatError(result)
        return result

    space = " " if negative.space else ""
    if negative.style is NegativeStyle.DASH:
        return f"-{space}{text}"
    if negative.style is NegativeStyle.BRACKETS:
        return f"({space}{text}{space})"
    return text


# ============================================================================
#                               Public API
# ============================================================================


def format_currency(
    value: str | int | float,
    options: FormatCurrencyOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format a number or currency string as a human-readable amount.

    Args:
        value: A number, or a string in any locale convention understood by
            ``parse_currency_string`` (e.g. ``"Rp 15.000,21"``, ``"$12,345.60"``).
        options: A ``FormatCurrencyOptions``, a mapping of option names
            (snake_case or camelCase), or ``None`` for the defaults.
        **overrides: Individual options applied on top of ``options``.

    Returns:
        The formatted amount.

    Raises:
        InvalidValueError: If ``value`` is not a str, int or float.
        InvalidOptionError: If any option has the wrong type or value.
        UnknownOptionError: If an option name is not recognised.
        UnparseableValueError: If ``value`` holds no digits or is not finite.
        CustomNegativeFormatError: If a custom negative renderer returns a non-str.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidValueError(value)

    opts = _resolve_options(options, overrides)

    amount = _read_amount(value)
    is_negative = amount < 0

    rounded = apply_rounding(abs(amount), opts.total_decimal, opts.rounding)
    integer_part, _, decimal_part = format(rounded, "f").partition(".")
    decimal_part = decimal_part.ljust(opts.total_decimal, "0")

    separator, separator_decimals = opts.effective_separators()
    grouped = (
        group_indian(integer_part, separator)
        if opts.indian_format
        else group_thousands(integer_part, separator)
    )

    result = (opts.suffix_currency if opts.suffix_currency.strip() else "") + grouped

    if opts.decimal and opts.total_decimal > 0:
        result += separator_decimals + decimal_part
        if opts.end_decimal:
            result += opts.suffix_decimal

    if is_negative:
        result = _style_negative(result, opts.negative)

    logger.debug("Formatted %r as %r", value, result)
    return result
