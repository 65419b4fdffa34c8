"""TIDBITS currency CLI: ``tidbits currency parse|format``.

Behavior
- Results are printed to **stdout**, one per line, so they can be piped.
- ``format`` starts from ``--preset`` (default: ``TIDBITS_CURRENCY_PRESET``, or
  the library defaults when unset); each explicit option is applied on top.
- Negative VALUEs go after ``--`` (``format -- -1500``).
- A VALUE that is a plain number (``1234.5``, ``-0.25``) is taken literally.
  Anything else goes through the lenient currency parser, so ``"Rp 1.500,75"``
  and ``"$1,500.75"`` both work.

Failure modes
- Unknown preset, invalid options or an unparseable VALUE → ``ClickException``.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import click
import click_extra as clickx

from tidbits import config
from tidbits.currency import (
    PRESETS,
    CurrencyError,
    FormatCurrencyOptions,
    format_currency,
    get_preset,
    parse_currency_string,
)

logger = logging.getLogger(__name__)

PLAIN_NUMBER_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")
ROUNDING_CHOICES = ("round", "ceil", "floor", "truncate")
NEGATIVE_CHOICES = ("dash", "brackets", "abs")


def _read_value(value: str) -> str | int | float:
    """Return ``value`` as a number when it is a plain literal, else unchanged."""
    text = value.strip()
    if not PLAIN_NUMBER_PATTERN.fullmatch(text):
        return value
    return float(text) if "." in text else int(text)


def _base_options(preset: str | None) -> FormatCurrencyOptions:
    try:
        if preset is not None:
            return get_preset(preset)
        return config.get_default_preset() or FormatCurrencyOptions()
    except CurrencyError as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def currency() -> None:
    """Parse and format currency amounts."""


@currency.command(name="parse")
@click.argument("value")
def parse_cmd(value: str) -> None:
    """Print the number read from a currency string (0 when nothing is found).

    Put ``--`` before a VALUE starting with "-", e.g.
    ``tidbits currency parse -- -1.500,25``.
    """
    amount = parse_currency_string(value)
    logger.debug("Parsed %r as %r", value, amount)
    click.echo(repr(amount))


@currency.command(name="format")
@click.argument("value")
@click.option(
    "--preset",
    type=click.Choice(sorted(PRESETS), case_sensitive=False),
    default=None,
    help=(
        "Start from a named preset. Defaults to TIDBITS_CURRENCY_PRESET, "
        "or the library defaults ('.' grouping, ',' decimals) when unset."
    ),
)
@click.option("--separator", default=None, help="Thousands grouping mark.")
@click.option("--decimal-separator", default=None, help="Decimal mark.")
@click.option(
    "--decimals",
    type=click.IntRange(min=0),
    default=None,
    help="Show N decimal digits (also the rounding precision).",
)
@click.option(
    "--rounding",
    type=click.Choice(ROUNDING_CHOICES, case_sensitive=False),
    default=None,
    help="How the amount is brought to --decimals digits.",
)
@click.option(
    "--negative",
    type=click.Choice(NEGATIVE_CHOICES, case_sensitive=False),
    default=None,
    help="How negative amounts are shown: -1.500, (1.500) or 1.500.",
)
@click.option(
    "--space/--no-space",
    default=None,
    help="Put a space inside the negative marker: '- 1.500', '( 1.500 )'.",
)
@click.option(
    "--indian/--no-indian",
    default=None,
    help="Indian digit grouping (12,34,567); forces ',' and '.' marks.",
)
@click.option("--prefix", default=None, help="Currency text placed before the amount.")
@click.option("--suffix", default=None, help="Text placed after the decimals, e.g. '.-'.")
def format_cmd(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    value: str,
    preset: str | None,
    separator: str | None,
    decimal_separator: str | None,
    decimals: int | None,
    rounding: str | None,
    negative: str | None,
    space: bool | None,
    indian: bool | None,
    prefix: str | None,
    suffix: str | None,
) -> None:
    """Format VALUE as a currency amount.

    Put ``--`` before a negative VALUE so it is not read as an option,
    e.g. ``tidbits currency format --negative brackets -- -1500``.
    """
    base = _base_options(preset)

    overrides: dict[str, Any] = {}
    if separator is not None:
        overrides["separator"] = separator
    if decimal_separator is not None:
        overrides["separator_decimals"] = decimal_separator
    if decimals is not None:
        overrides["decimal"] = decimals > 0
        overrides["total_decimal"] = decimals
    if rounding is not None:
        overrides["rounded_decimal"] = False if rounding == "truncate" else rounding.lower()
    if negative is not None or space is not None:
        overrides["negative_format"] = {
            "style": (negative or base.negative.style.value).lower(),
            "space": base.negative.space if space is None else space,
        }
    if indian is not None:
        overrides["indian_format"] = indian
    if prefix is not None:
        overrides["suffix_currency"] = prefix
    if suffix is not None:
        overrides["suffix_decimal"] = suffix

    logger.debug("Formatting %r with %r and overrides %r", value, base, overrides)
    try:
        click.echo(format_currency(_read_value(value), base, **overrides))
    except CurrencyError as e:
        raise click.ClickException(str(e)) from e
