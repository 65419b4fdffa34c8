"""Named ``FormatCurrencyOptions`` bundles for common locale conventions."""

from types import MappingProxyType

from .errors import PresetNotFoundError
from .options import FormatCurrencyOptions

PRESETS = MappingProxyType(
    {
        "id": FormatCurrencyOptions(
            separator=".", separator_decimals=",", suffix_currency="Rp "
        ),
        "eu": FormatCurrencyOptions(separator=".", separator_decimals=","),
        "us": FormatCurrencyOptions(
            separator=",", separator_decimals=".", suffix_currency="$"
        ),
        "ch": FormatCurrencyOptions(
            separator="'", separator_decimals=".", suffix_currency="CHF "
        ),
        "in": FormatCurrencyOptions(indian_format=True, suffix_currency="₹"),
    }
)


def get_preset(name: str) -> FormatCurrencyOptions:
    """Return the preset registered under ``name`` (case-insensitive).

    Raises:
        PresetNotFoundError: If no preset has that name.
    """
    try:
        return PRESETS[name.strip().lower()]
    except KeyError as e:
        raise PresetNotFoundError(name, tuple(PRESETS)) from e
