"""Errors raised by the currency formatter.

The parser never raises; only ``format_currency`` and option validation do.
Each error also derives from the matching built-in (``TypeError`` or
``ValueError``) so callers may catch either.
"""

from typing import Any


class CurrencyError(Exception):
    """Base class for all currency-related errors."""


class InvalidOptionError(CurrencyError, TypeError):
    """Raised when a formatting option has the wrong type or an unsupported value."""

    def __init__(self, option: str, expected: str, received: Any) -> None:
        super().__init__(
            f"Option '{option}' must be {expected}, got {received!r} "
            f"({type(received).__name__})."
        )
        self.option = option
        self.expected = expected
        self.received = received


class UnknownOptionError(CurrencyError, TypeError):
    """Raised when an options mapping contains a key that is not a known option."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown formatting option '{option}'.")
        self.option = option


class InvalidValueError(CurrencyError, TypeError):
    """Raised when the value to format is not a string or a real number."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Value must be a str, int or float, got {type(value).__name__}."
        )
        self.value = value


class UnparseableValueError(CurrencyError, ValueError):
    """Raised when the value to format cannot be read as a finite number."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Value {value!r} could not be parsed into a valid number.")
        self.value = value


class CustomNegativeFormatError(CurrencyError, TypeError):
    """Raised when a custom negative formatter does not return a string."""

    def __init__(self, result: Any) -> None:
        super().__init__(
            "Custom negative formatter must return a str, "
            f"got {type(result).__name__}."
        )
        self.result = result


class PresetNotFoundError(CurrencyError, KeyError):
    """Raised when a named formatting preset does not exist."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown currency preset '{name}'. Available: {', '.join(available)}."
        )
        self.name = name
        self.available = available

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
