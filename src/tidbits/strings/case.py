"""String case conversion.

All converters split their input into words on runs of characters outside
``[A-Za-z0-9]`` and return ``""`` for anything that is not a non-blank string.

Examples:
    ```py
    >>> to_camel_case("hello world-foo")
    'helloWorldFoo'
    >>> to_snake_case("Hello World!")
    'hello_world'
    >>> slugify("  Hello, World! ")
    'hello-world'
    ```
"""

from __future__ import annotations

import re
from typing import Any

from tidbits.predicates import is_non_empty_string

WORD_SPLIT_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")


def _words(value: str) -> list[str]:
    return [word for word in WORD_SPLIT_PATTERN.split(value) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def capitalize_first(value: Any, *, lower_rest: bool = True, trim: bool = False) -> str:
    """Uppercase the first character of ``value``.

    Args:
        value: The string to transform.
        lower_rest: Lowercase everything after the first character (default True).
        trim: Strip surrounding whitespace first (default False).
    """
    if not is_non_empty_string(value):
        return ""
    if trim:
        value = value.strip()
    rest = value[1:].lower() if lower_rest else value[1:]
    return value[0].upper() + rest


def capitalize_words(
    value: Any, *, trim: bool = False, collapse_spaces: bool = False
) -> str:
    """Capitalize every space-separated word and lowercase the rest.

    Args:
        value: The string to transform.
        trim: Strip leading/trailing whitespace (default False).
        collapse_spaces: Collapse whitespace runs *between* words into a single
            space while keeping leading/trailing whitespace (default False).
    """
    if not is_non_empty_string(value):
        return ""

    result = value.strip() if trim else value

    if collapse_spaces:
        core = result.strip()
        leading = result[: len(result) - len(result.lstrip())]
        trailing = result[len(result.rstrip()) :]
        result = leading + WHITESPACE_RUN_PATTERN.sub(" ", core) + trailing

    return " ".join(_capitalize(word) for word in result.lower().split(" "))


def to_camel_case(value: Any) -> str:
    """``"hello world"`` -> ``"helloWorld"``."""
    if not is_non_empty_string(value):
        return ""
    words = _words(value)
    return "".join(
        word.lower() if index == 0 else _capitalize(word)
        for index, word in enumerate(words)
    )


def to_pascal_case(value: Any) -> str:
    """``"hello world"`` -> ``"HelloWorld"``."""
    if not is_non_empty_string(value):
        return ""
    return "".join(_capitalize(word) for word in _words(value))


def _join_lower(value: Any, separator: str) -> str:
    if not is_non_empty_string(value):
        return ""
    return separator.join(word.lower() for word in _words(value))


def to_kebab_case(value: Any) -> str:
    """``"Hello World"`` -> ``"hello-world"``."""
    return _join_lower(value, "-")


def to_snake_case(value: Any) -> str:
    """``"Hello World"`` -> ``"hello_world"``."""
    return _join_lower(value, "_")


def to_dot_case(value: Any) -> str:
    """``"Hello World"`` -> ``"hello.world"``."""
    return _join_lower(value, ".")


def slugify(value: Any) -> str:
    """URL slug: lowercase words joined by ``-``, no leading/trailing dashes."""
    return _join_lower(value, "-").strip("-")


CASE_CONVERTERS = {
    "camel": to_camel_case,
    "pascal": to_pascal_case,
    "kebab": to_kebab_case,
    "snake": to_snake_case,
    "dot": to_dot_case,
    "slug": slugify,
}
