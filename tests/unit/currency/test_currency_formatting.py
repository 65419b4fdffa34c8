"""Unit tests for `tidbits.currency.formatting.format_currency`."""

import pytest

from tidbits.currency import (
    CustomNegativeFormatError,
    FormatCurrencyOptions,
    InvalidOptionError,
    InvalidValueError,
    NegativeFormat,
    NegativeStyle,
    RoundingMode,
    UnknownOptionError,
    UnparseableValueError,
    format_currency,
    get_preset,
    parse_currency_string,
)
from tidbits.currency.formatting import group_indian, group_thousands

# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("digits", "expected"),
    [("0", "0"), ("999", "999"), ("1000", "1.000"), ("1234567", "1.234.567")],
)
def test_group_thousands(digits, expected):
    """Groups of three from the right."""
    assert group_thousands(digits, ".") == expected


@pytest.mark.parametrize(
    ("digits", "expected"),
    [("567", "567"), ("1567", "1,567"), ("1234567", "12,34,567"), ("123456789", "12,34,56,789")],
)
def test_group_indian(digits, expected):
    """Last three digits, then pairs."""
    assert group_indian(digits, ",") == expected


# ---------------------------------------------------------------------------
# format_currency
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "overrides", "expected"),
    [
        (1000000, {}, "1.000.000"),
        (0, {}, "0"),
        (1500.75, {}, "1.500"),
        (15000, {"suffix_currency": "Rp "}, "Rp 15.000"),
        (15000, {"suffix_currency": "   "}, "15.000"),
        (1500, {"decimal": True}, "1.500,00"),
        (1500, {"decimal": True, "suffix_decimal": ".-"}, "1.500,00.-"),
        (1500, {"decimal": True, "suffix_decimal": ".-", "end_decimal": False}, "1.500,00"),
        (1500, {"decimal": True, "total_decimal": 0}, "1.500"),
        (1234.5, {"decimal": True, "total_decimal": 3}, "1.234,500"),
        (1234.5, {"separator": ",", "separator_decimals": ".", "decimal": True}, "1,234.50"),
        ("Rp 15.000,21", {"decimal": True}, "15.000,21"),
        ("$12,345.60", {"decimal": True}, "12.345,60"),
    ],
)
def test_formats_amounts(value, overrides, expected):
    """Grouping, decimals, currency prefix and decimal suffix."""
    assert format_currency(value, **overrides) == expected


@pytest.mark.parametrize(
    ("text", "overrides"),
    [
        ("15.300.000", {"separator": "."}),
        ("15,300,000", {"separator": ","}),
        ("1.000", {"separator": "."}),
        ("999", {"separator": "."}),
        ("12,34,567", {"indian_format": True}),
    ],
)
def test_grouped_integers_survive_parse_then_format(text, overrides):
    """A grouped integer string is rebuilt exactly from its parsed value."""
    assert format_currency(parse_currency_string(text), **overrides) == text


@pytest.mark.parametrize(
    ("rounding", "expected"),
    [("round", "2,35"), ("ceil", "2,35"), ("floor", "2,34"), (False, "2,34")],
)
def test_rounding_modes(rounding, expected):
    """Each rounding mode is applied once, at the requested precision."""
    assert format_currency(2.345, decimal=True, rounded_decimal=rounding) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.125, "0,13"), (1.005, "1,01"), (2.675, "2,68")],
)
def test_round_half_up_uses_the_written_value(value, expected):
    """Halves round up based on the number as written, not its binary approximation."""
    assert format_currency(value, decimal=True) == expected


def test_truncation_keeps_digits_without_rounding():
    """``rounded_decimal=False`` cuts extra digits."""
    assert format_currency(2.349, decimal=True, rounded_decimal=False) == "2,34"
    assert format_currency(9.999, decimal=True, rounded_decimal=False) == "9,99"


@pytest.mark.parametrize(
    ("negative_format", "expected"),
    [
        ("dash", "-1.500"),
        ("brackets", "(1.500)"),
        ("abs", "1.500"),
        (NegativeStyle.BRACKETS, "(1.500)"),
        ({"style": "dash", "space": True}, "- 1.500"),
        ({"style": "brackets", "space": True}, "( 1.500 )"),
        (NegativeFormat(style=NegativeStyle.DASH, space=True), "- 1.500"),
        ({"custom": lambda text: f"{text} CR"}, "1.500 CR"),
    ],
)
def test_negative_styles(negative_format, expected):
    """Negative amounts are rendered according to ``negative_format``."""
    assert format_currency(-1500, negative_format=negative_format) == expected


def test_negative_style_is_not_applied_to_positive_amounts():
    """Brackets only ever wrap negative amounts."""
    assert format_currency(1500, negative_format="brackets") == "1.500"


def test_negative_string_with_prefix_and_ceiling():
    """Parsed negative strings get the prefix inside the negative marker."""
    result = format_currency(
        "-1.121.234,561",
        decimal=True,
        suffix_currency="Rp ",
        rounded_decimal="ceil",
        negative_format={"style": "brackets"},
    )
    assert result == "(Rp 1.121.234,57)"


def test_indian_format_overrides_separators():
    """Indian grouping forces ',' and '.' whatever separators were asked for."""
    assert format_currency(1234567, indian_format=True, separator=" ") == "12,34,567"
    assert format_currency(123456.789, indian_format=True, decimal=True) == "1,23,456.79"


def test_options_object_and_mapping_are_equivalent():
    """A FormatCurrencyOptions and a camelCase mapping give the same result."""
    as_object = FormatCurrencyOptions(separator=",", separator_decimals=".", decimal=True)
    as_mapping = {"separator": ",", "separatorDecimals": ".", "decimal": True}
    assert format_currency(9876.5, as_object) == format_currency(9876.5, as_mapping) == "9,876.50"


def test_overrides_apply_on_top_of_a_preset():
    """Keyword overrides win over the options object."""
    assert format_currency(1234.5, get_preset("us"), decimal=True) == "$1,234.50"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [None, True, [1], {"a": 1}])
def test_invalid_value_type(value):
    """Only str, int and float are accepted."""
    with pytest.raises(InvalidValueError):
        format_currency(value)


@pytest.mark.parametrize("value", ["abc", "", "Rp", float("nan"), float("inf")])
def test_unparseable_values(value):
    """Strings without digits and non-finite floats cannot be formatted."""
    with pytest.raises(UnparseableValueError) as exc:
        format_currency(value)
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize(
    ("overrides", "option"),
    [
        ({"rounded_decimal": "bad"}, "rounded_decimal"),
        ({"rounded_decimal": True}, "rounded_decimal"),
        ({"total_decimal": -1}, "total_decimal"),
        ({"total_decimal": 2.5}, "total_decimal"),
        ({"decimal": "yes"}, "decimal"),
        ({"separator": 1}, "separator"),
        ({"negative_format": "minus"}, "negative_format"),
    ],
)
def test_invalid_options(overrides, option):
    """Invalid options are rejected before any work, naming the option."""
    with pytest.raises(InvalidOptionError) as exc:
        format_currency(1000, **overrides)
    assert exc.value.option == option
    assert isinstance(exc.value, TypeError)


def test_unknown_option():
    """Misspelled option names are not silently ignored."""
    with pytest.raises(UnknownOptionError):
        format_currency(1000, seperator=",")


def test_options_argument_must_be_options_or_mapping():
    """A positional options argument of the wrong type is rejected."""
    with pytest.raises(InvalidOptionError):
        format_currency(1000, "us")


def test_custom_negative_format_must_return_str():
    """A custom negative renderer returning a non-string is a contract violation."""
    with pytest.raises(CustomNegativeFormatError):
        format_currency(-1, negative_format={"custom": lambda text: 42})


def test_rounding_mode_enum_is_accepted():
    """RoundingMode members work as well as their names."""
    assert format_currency(2.341, decimal=True, rounded_decimal=RoundingMode.CEIL) == "2,35"
