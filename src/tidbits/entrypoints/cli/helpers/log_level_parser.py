"""Helpers for parsing logger-level CLI options.

``-L/--logger-level`` accepts ``NAME=LEVEL`` pairs, either repeated on the
command line or as one comma/space separated string from
``TIDBITS_LOGGER_LEVELS``. Pairs are merged over ``DEFAULT_LIB_LEVELS``.
"""

import logging
import re

import click

ITEM_SPLIT_PATTERN = re.compile(r"[,\s]+")

# Chatty libraries kept quiet unless asked otherwise
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING, "markdown_it": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the option value into non-empty ``NAME=LEVEL`` items.

    Args:
        value: A single string (possibly holding several items) or the
            sequence Click builds for a repeatable option.

    Returns:
        list[str]: The individual items.
    """
    chunks = value if isinstance(value, (tuple, list)) else [value]
    return [item for chunk in chunks for item in ITEM_SPLIT_PATTERN.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` pairs into a name -> level dict.

    Args:
        ctx: Click context (unused).
        param: Click parameter (unused).
        value: The raw option value(s).

    Returns:
        dict[str, int]: ``DEFAULT_LIB_LEVELS`` updated with the given pairs;
        later pairs win.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
