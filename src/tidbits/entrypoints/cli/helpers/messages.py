"""Terminal message helpers for the TIDBITS CLI.

Results of a command (a formatted amount, a slug, ...) go to stdout so they can
be piped; the human notices emitted here go to stderr, with emoji→ASCII
fallbacks for terminals that cannot encode them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so a redirected stderr is honoured.

    Args:
        character: The glyph to probe (e.g., "⚠️", "✅").

    Returns:
        bool: False when encoding raises ``UnicodeEncodeError``.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" where stderr cannot encode it."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅", or "[OK]" where stderr cannot encode it."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌", or "[X]" where stderr cannot encode it."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  '12.5' reads as 125 (the lone '.' is a thousands mark).``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Unknown currency preset 'xx'.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
