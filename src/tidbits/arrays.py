"""List transforms: null filtering, deep flattening and deduplication.

Lists and tuples are treated alike as "arrays"; results are always lists.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Set
from datetime import date, time
from typing import Any, Literal, TypeAlias

from tidbits.predicates import is_deep_equal

ForceToString: TypeAlias = Literal[False, "string_or_number", "primitives", "all"]
FORCE_TO_STRING_MODES: tuple[ForceToString, ...] = (
    False,
    "string_or_number",
    "primitives",
    "all",
)

ARRAY_TYPES = (list, tuple)


def filter_null_array(items: Any) -> list[Any] | None:
    """Remove ``None`` entries, recursively.

    Nested lists are cleaned too and dropped entirely when nothing is left.

    Args:
        items: The list to clean.

    Returns:
        ``None`` if ``items`` is ``None``; ``[]`` if it is not a list/tuple;
        otherwise the cleaned list.

    Example:
        ```py
        >>> filter_null_array([1, None, [None], [2, None]])
        [1, [2]]
        ```
    """
    if items is None:
        return None
    if not isinstance(items, ARRAY_TYPES):
        return []

    output: list[Any] = []
    for element in items:
        if element is None:
            continue
        if isinstance(element, ARRAY_TYPES):
            if nested := filter_null_array(element):
                output.append(nested)
        else:
            output.append(element)
    return output


def deep_flatten(value: Any) -> list[Any]:
    """Flatten lists, tuples and sets at any depth; other values become one item.

    Mappings are not flattened.
    """
    if isinstance(value, (*ARRAY_TYPES, Set)):
        return [leaf for item in value for leaf in deep_flatten(item)]
    return [value]


def to_string_deep_force(  # pylint: disable=too-many-return-statements
    value: Any, mode: ForceToString
) -> Any:
    """Convert values to strings according to ``mode``, descending into containers.

    Modes:
    - ``False``: leave scalars untouched (containers are still copied).
    - ``"string_or_number"``: ``str`` and numbers become strings.
    - ``"primitives"``: additionally ``bool``, ``None`` and ``NaN``.
    - ``"all"``: additionally dates, regexes, exceptions, callables and sets.
    """
    primitives = mode in ("primitives", "all")

    if isinstance(value, float) and math.isnan(value):
        return "NaN" if primitives else value
    if value is None or isinstance(value, bool):
        return str(value) if primitives else value
    if isinstance(value, (str, int, float)):
        return str(value) if mode else value

    if isinstance(value, ARRAY_TYPES):
        return [to_string_deep_force(item, mode) for item in value]
    if isinstance(value, Mapping):
        return {key: to_string_deep_force(item, mode) for key, item in value.items()}

    if mode != "all":
        return value
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, Set):
        return [to_string_deep_force(item, mode) for item in value]
    if callable(value):
        return getattr(value, "__qualname__", repr(value))
    return value


def dedupe_array(
    items: list[Any] | tuple[Any, ...],
    *,
    force_to_string: ForceToString = False,
    flatten: bool = False,
) -> list[Any]:
    """Remove duplicates while preserving first-seen order.

    Duplicates are detected with ``is_deep_equal``; nested lists are
    deduplicated recursively.

    Args:
        items: The list to deduplicate.
        force_to_string: Convert values to strings before comparing, see
            ``to_string_deep_force``. ``"string_or_number"`` makes ``1`` and
            ``"1"`` duplicates.
        flatten: Deeply flatten lists, tuples and sets first.

    Returns:
        A new list.

    Raises:
        TypeError: If ``items`` is not a list/tuple, or an option is invalid.

    Example:
        ```py
        >>> dedupe_array([1, "1", [2, 2], [2]], force_to_string="string_or_number")
        ['1', ['2']]
        ```
    """
    if not isinstance(items, ARRAY_TYPES):
        raise TypeError(f"'items' must be a list or tuple, got {type(items).__name__}")
    if force_to_string is not False and force_to_string not in FORCE_TO_STRING_MODES[1:]:
        raise TypeError(
            "'force_to_string' must be False | 'string_or_number' | 'primitives' | 'all'"
        )
    if not isinstance(flatten, bool):
        raise TypeError(f"'flatten' must be a bool, got {type(flatten).__name__}")

    def process(array: list[Any] | tuple[Any, ...]) -> list[Any]:
        seen: list[Any] = []
        for item in array:
            value = (
                process(item)
                if isinstance(item, ARRAY_TYPES)
                else to_string_deep_force(item, force_to_string)
            )
            if not any(is_deep_equal(existing, value) for existing in seen):
                seen.append(value)
        return seen

    return process(deep_flatten(items) if flatten else items)
