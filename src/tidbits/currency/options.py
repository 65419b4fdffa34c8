"""Value objects describing how a currency amount is rendered.

``FormatCurrencyOptions`` is an immutable record in which every field has an
explicit default. Instances validate themselves on construction, so a
misconfigured formatter fails before any number is touched.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Literal, TypeAlias

from .errors import InvalidOptionError, UnknownOptionError

DEFAULT_SEPARATOR = "."
DEFAULT_SEPARATOR_DECIMALS = ","
DEFAULT_TOTAL_DECIMAL = 2
INDIAN_SEPARATOR = ","
INDIAN_SEPARATOR_DECIMALS = "."


class RoundingMode(Enum):
    """How the amount is rounded to ``total_decimal`` digits.

    Truncation is not a member; it is requested with ``rounded_decimal=False``.
    """

    ROUND = "round"
    CEIL = "ceil"
    FLOOR = "floor"


class NegativeStyle(Enum):
    """Enumeration of the built-in negative amount renderings.

    Styles:
    - DASH: ``-1.500``
    - BRACKETS: ``(1.500)`` (accounting notation)
    - ABS: ``1.500`` (sign dropped)
    """

    DASH = "dash"
    BRACKETS = "brackets"
    ABS = "abs"


@dataclass(frozen=True)
class NegativeFormat:
    """Negative styling with an optional space or a custom renderer.

    When ``custom`` is set it takes precedence: it receives the formatted
    (positive) string and its return value replaces the whole result.
    """

    style: NegativeStyle = NegativeStyle.DASH
    space: bool = False
    custom: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.style, NegativeStyle):
            raise InvalidOptionError(
                "negative_format.style", "one of 'dash' | 'brackets' | 'abs'", self.style
            )
        if not isinstance(self.space, bool):
            raise InvalidOptionError("negative_format.space", "a bool", self.space)
        if self.custom is not None and not callable(self.custom):
            raise InvalidOptionError(
                "negative_format.custom", "a callable (str) -> str", self.custom
            )

    @classmethod
    def coerce(cls, value: Any) -> NegativeFormat:
        """Build a NegativeFormat from any accepted ``negative_format`` shape.

        Accepts a ``NegativeFormat``, a ``NegativeStyle``, a style name or a
        mapping with ``style``/``space``/``custom`` keys.

        Raises:
            InvalidOptionError: If the value has none of the accepted shapes.
        """
        if isinstance(value, NegativeFormat):
            return value
        if isinstance(value, NegativeStyle):
            return cls(style=value)
        if isinstance(value, str):
            return cls(style=_negative_style(value, "negative_format"))
        if isinstance(value, Mapping):
            unknown = set(value) - {"style", "space", "custom"}
            if unknown:
                raise UnknownOptionError(f"negative_format.{sorted(unknown)[0]}")
            if value.get("custom") is not None:
                return cls(custom=value["custom"])
            style = value.get("style") or NegativeStyle.DASH
            if not isinstance(style, NegativeStyle):
                style = _negative_style(style, "negative_format.style")
            space = value.get("space")
            return cls(style=style, space=False if space is None else space)
        raise InvalidOptionError(
            "negative_format",
            "one of 'dash' | 'brackets' | 'abs', a NegativeFormat or a mapping",
            value,
        )


RoundingOption: TypeAlias = RoundingMode | Literal["round", "ceil", "floor", False]
NegativeFormatOption: TypeAlias = (
    NegativeStyle | NegativeFormat | Mapping[str, Any] | Literal["dash", "brackets", "abs"]
)


def _negative_style(value: Any, option: str) -> NegativeStyle:
    try:
        return NegativeStyle(value)
    except ValueError as e:
        raise InvalidOptionError(
            option, "one of 'dash' | 'brackets' | 'abs'", value
        ) from e


def _rounding_mode(value: Any) -> RoundingMode | None:
    if value is False:
        return None
    if isinstance(value, RoundingMode):
        return value
    if isinstance(value, str) and value in {m.value for m in RoundingMode}:
        return RoundingMode(value)
    raise InvalidOptionError(
        "rounded_decimal", "False or one of 'round' | 'ceil' | 'floor'", value
    )


def _camel_to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass(frozen=True)
class FormatCurrencyOptions:  # pylint: disable=too-many-instance-attributes
    """Configuration for ``format_currency``.

    Attributes:
        separator: Grouping mark for the integer part.
        separator_decimals: Decimal mark.
        decimal: Whether a decimal part is emitted at all.
        total_decimal: Number of decimal digits (also the rounding precision).
        suffix_decimal: Text appended after the decimals (e.g. ``".-"``).
        end_decimal: Whether ``suffix_decimal`` is actually appended.
        rounded_decimal: A ``RoundingMode`` (or its name), or ``False`` to truncate.
        negative_format: A style name, ``NegativeStyle``, ``NegativeFormat`` or
            a mapping with ``style``/``space``/``custom`` keys.
        indian_format: Use Indian digit grouping; forces the separators to
            ``","`` and ``"."``.
        suffix_currency: Literal prefix such as ``"Rp "`` (applied when not blank).
    """

    separator: str = DEFAULT_SEPARATOR
    separator_decimals: str = DEFAULT_SEPARATOR_DECIMALS
    decimal: bool = False
    total_decimal: int = DEFAULT_TOTAL_DECIMAL
    suffix_decimal: str = ""
    end_decimal: bool = True
    rounded_decimal: RoundingOption = RoundingMode.ROUND
    negative_format: NegativeFormatOption = NegativeStyle.DASH
    indian_format: bool = False
    suffix_currency: str = ""
    _negative: NegativeFormat = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check every option's type and value.

        Raises:
            InvalidOptionError: Naming the first offending option.
        """
        for name in ("separator", "separator_decimals", "suffix_decimal", "suffix_currency"):
            if not isinstance(getattr(self, name), str):
                raise InvalidOptionError(name, "a str", getattr(self, name))

        for name in ("decimal", "end_decimal", "indian_format"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOptionError(name, "a bool", getattr(self, name))

        total = self.total_decimal
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            raise InvalidOptionError("total_decimal", "a non-negative int", total)

        _rounding_mode(self.rounded_decimal)

        object.__setattr__(self, "_negative", NegativeFormat.coerce(self.negative_format))

    @property
    def rounding(self) -> RoundingMode | None:
        """The rounding mode, or ``None`` when the amount is truncated."""
        return _rounding_mode(self.rounded_decimal)

    @property
    def negative(self) -> NegativeFormat:
        """The negative styling, normalized to a ``NegativeFormat``."""
        return self._negative

    def effective_separators(self) -> tuple[str, str]:
        """Return the ``(grouping, decimal)`` marks actually used for output."""
        if self.indian_format:
            return INDIAN_SEPARATOR, INDIAN_SEPARATOR_DECIMALS
        return self.separator, self.separator_decimals

    def merged(self, **overrides: Any) -> FormatCurrencyOptions:
        """Return a copy with ``overrides`` applied (camelCase keys accepted)."""
        if not overrides:
            return self
        return replace(self, **_normalize_keys(overrides))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> FormatCurrencyOptions:
        """Build options from a mapping with snake_case or camelCase keys.

        Example:
            ```py
            FormatCurrencyOptions.from_mapping({"separatorDecimals": ".", "decimal": True})
            ```

        Raises:
            InvalidOptionError: If ``values`` is not a mapping or a value is invalid.
            UnknownOptionError: If a key is not a known option.
        """
        if not isinstance(values, Mapping):
            raise InvalidOptionError("options", "a mapping", values)
        return cls(**_normalize_keys(values))


_OPTION_NAMES = frozenset(
    f.name for f in fields(FormatCurrencyOptions) if f.init
)


def _normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in values.items():
        name = _camel_to_snake(key)
        if name not in _OPTION_NAMES:
            raise UnknownOptionError(key)
        normalized[name] = value
    return normalized
