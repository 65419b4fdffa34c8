"""Pathname and URL helpers.

Pure string manipulation; nothing here performs network I/O.

Examples:
    ```py
    >>> normalize_pathname("  //foo//bar ")
    '/foo/bar'
    >>> normalize_pathname("https://example.com/path?x=1#top")
    '/path?x=1#top'
    >>> get_prefix_pathname("/settings/profile/edit", levels=2)
    '/settings/profile'
    ```
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

from tidbits.predicates import is_non_empty_string

WHITESPACE_PATTERN = re.compile(r"\s+")
LEADING_SLASHES_PATTERN = re.compile(r"^/+")
REPEATED_SLASHES_PATTERN = re.compile(r"/{2,}")
NON_DIGITS_PATTERN = re.compile(r"\D+")
URL_SCHEMES = ("http://", "https://")


class UrlError(Exception):
    """Base class for URL helper errors."""


class NormalizePathnameError(UrlError):
    """Raised when a pathname cannot be normalized (e.g. a malformed absolute URL)."""

    def __init__(self, message: str, original: Exception) -> None:
        super().__init__(message)
        self.original = original


def _require_default(name: str, value: Any) -> None:
    if not is_non_empty_string(value):
        raise TypeError(
            f"Invalid parameter: '{name}' must be a non-empty string. "
            f"Received: {type(value).__name__} ({value!r})"
        )


def normalize_pathname(pathname: Any, default: str = "/") -> str:
    """Normalize ``pathname`` to a clean, absolute path.

    Whitespace is removed, repeated slashes are collapsed and a leading ``/``
    is guaranteed. Absolute ``http(s)`` URLs are reduced to their path, query
    and fragment.

    Args:
        pathname: The path or URL.
        default: Returned when ``pathname`` is not a non-blank string.

    Returns:
        The normalized pathname.

    Raises:
        TypeError: If ``default`` is not a non-empty string.
        NormalizePathnameError: If an absolute URL cannot be parsed.
    """
    _require_default("default", default)
    if not is_non_empty_string(pathname):
        return default

    path = WHITESPACE_PATTERN.sub("", pathname)

    if path.startswith(URL_SCHEMES):
        try:
            parts = urlsplit(path)
        except ValueError as e:
            raise NormalizePathnameError(
                f"Failed to normalize pathname {pathname!r}: {e}", e
            ) from e
        result = parts.path or "/"
        if parts.query:
            result += f"?{parts.query}"
        if parts.fragment:
            result += f"#{parts.fragment}"
        return LEADING_SLASHES_PATTERN.sub("/", result)

    return "/" + REPEATED_SLASHES_PATTERN.sub("/", LEADING_SLASHES_PATTERN.sub("", path))


def get_prefix_pathname(
    url: str | list[str],
    base: str | list[str] | None = None,
    *,
    levels: int = 1,
    remove_duplicates: bool = True,
) -> str | list[str] | None:
    """Extract the leading segment(s) of one or more paths.

    Without ``base`` the first ``levels`` path segments are returned. With
    ``base`` the (first) base the normalized path starts with is returned, or
    ``None`` when none matches.

    Args:
        url: A path or a list of paths.
        base: A base path or list of base paths to match against.
        levels: Number of segments to keep when no ``base`` is given.
        remove_duplicates: Deduplicate the results for a list of paths.

    Returns:
        For a single path, the prefix (or ``None``). For a list, the list of
        prefixes, collapsed to a single string when only one remains.

    Raises:
        TypeError: Listing every invalid parameter at once.
    """
    errors: list[str] = []
    if not isinstance(url, (str, list)):
        errors.append(f"'url' must be a string or a list of strings. Received: {type(url).__name__}")
    if base is not None and not isinstance(base, (str, list)):
        errors.append(
            f"'base' must be a string, a list of strings, or None. Received: {type(base).__name__}"
        )
    if isinstance(levels, bool) or not isinstance(levels, int):
        errors.append(f"'levels' must be an int. Received: {type(levels).__name__}")
    if not isinstance(remove_duplicates, bool):
        errors.append(
            f"'remove_duplicates' must be a bool. Received: {type(remove_duplicates).__name__}"
        )
    if errors:
        raise TypeError("Invalid parameter(s) in get_prefix_pathname:\n- " + "\n- ".join(errors))

    bases = [base] if isinstance(base, str) else base

    def prefix_of(single: str) -> str | None:
        if bases:
            path = normalize_pathname(single)
            for candidate in bases:
                if path.startswith(normalized := normalize_pathname(candidate)):
                    return normalized
            return None
        segments = [segment for segment in single.split("/") if segment]
        return "/" + "/".join(segments[:levels])

    if isinstance(url, str):
        return prefix_of(url)

    results = [prefix for prefix in map(prefix_of, url) if prefix is not None]
    if remove_duplicates:
        results = list(dict.fromkeys(results))
    if len(results) == 1:
        return results[0]
    return results


def get_first_prefix_pathname(result: str | list[str] | None, default: str = "/") -> str:
    """Return the first meaningful (not ``"/"``) normalized pathname in ``result``.

    Args:
        result: Typically the output of ``get_prefix_pathname``.
        default: Used when nothing meaningful is found.

    Raises:
        TypeError: If ``default`` is blank or ``result`` has an unsupported type.
    """
    _require_default("default", default)

    if isinstance(result, list):
        if not all(isinstance(item, str) for item in result):
            raise TypeError(
                f"Invalid parameter: 'result' list must only contain strings. Received: {result!r}"
            )
        for item in result:
            if (normalized := normalize_pathname(item)) != "/":
                return normalized
        return normalize_pathname(default)

    if isinstance(result, str):
        normalized = normalize_pathname(result)
        return normalized if normalized != "/" else normalize_pathname(default)

    if result is not None:
        raise TypeError(
            "Invalid parameter: 'result' must be a string, a list of strings, or None. "
            f"Received: {result!r}"
        )
    return normalize_pathname(default)


def format_env_port(value: Any, *, prefix_colon: bool = False) -> str:
    """Reduce a port setting (e.g. an environment variable) to its digits.

    Example:
        ```py
        >>> format_env_port(" 8080 ", prefix_colon=True)
        ':8080'
        ```
    """
    if not isinstance(prefix_colon, bool):
        raise TypeError("Option 'prefix_colon' must be a bool.")
    if not is_non_empty_string(value):
        return ""
    if not (digits := NON_DIGITS_PATTERN.sub("", value)):
        return ""
    return f":{digits}" if prefix_colon else digits
