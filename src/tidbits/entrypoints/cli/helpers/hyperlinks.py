"""OSC-8 hyperlinks for the TIDBITS CLI help epilog.

Renders a URL as a clickable terminal link where the terminal is known to
support it, and as plain text everywhere else (pipes, CI logs, dumb terminals).
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole", "foot")
OSC8_ENV_MARKERS = ("WT_SESSION", "VTE_VERSION")  # Windows Terminal, GNOME Terminal/Tilix


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` (default ``sys.stdout``) renders OSC-8 links.

    Non-TTY streams never do. For TTYs the terminal is matched against a
    conservative allowlist taken from ``TERM_PROGRAM``, ``TERM`` and a few
    terminal-specific environment variables.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if any(os.getenv(marker) for marker in OSC8_ENV_MARKERS):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, text: str | None = None) -> str:
    """Return ``url`` as an OSC-8 link labelled ``text`` (default the URL).

    Falls back to the bare URL when links are unsupported.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{text or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
