"""Errors raised by the string helpers."""


class StringsError(Exception):
    """Base class for string helper errors."""


class InvalidCensorModeError(StringsError, ValueError):
    """Raised when ``censor_email`` is given a mode other than 'random' or 'fixed'."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"Censor mode must be 'random' or 'fixed', got {mode!r}.")
        self.mode = mode
