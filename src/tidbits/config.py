"""Configuration utilities for TIDBITS.

This module centralizes small helpers and constants related to configuration.
All configuration comes from the environment; the library itself holds no
global state.
"""

import os

from tidbits.currency.options import FormatCurrencyOptions
from tidbits.currency.presets import get_preset

ENV_PREFIX = "TIDBITS"  # pragma: no mutate
CURRENCY_PRESET_ENV = f"{ENV_PREFIX}_CURRENCY_PRESET"


def get_default_preset_name() -> str | None:
    """Get the default currency preset name from the environment.

    Returns:
        The stripped value of `TIDBITS_CURRENCY_PRESET`, or `None` if it is unset
        or blank.
    """
    if not (name := os.environ.get(CURRENCY_PRESET_ENV, "").strip()):
        return None
    return name


def get_default_preset() -> FormatCurrencyOptions | None:
    """Resolve the default currency preset named in the environment.

    Returns:
        The preset's `FormatCurrencyOptions`, or `None` when
        `TIDBITS_CURRENCY_PRESET` is not set.

    Raises:
        PresetNotFoundError: If the variable names an unknown preset.
    """
    if (name := get_default_preset_name()) is None:
        return None
    return get_preset(name)
