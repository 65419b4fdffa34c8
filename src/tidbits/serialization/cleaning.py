"""Tolerant JSON parsing and post-parse cleaning.

``safe_json_parse`` never raises on malformed input; it returns ``None`` and
optionally logs or reports the failure. ``clean_parsed_data`` walks the parsed
structure, trimming strings and applying the conversions and removals selected
in ``CleanOptions``.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

DMY_FORMAT = "DD/MM/YYYY"
MDY_FORMAT = "MM/DD/YYYY"
SUPPORTED_DATE_FORMATS = (DMY_FORMAT, MDY_FORMAT)

ISO_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")
DATE_PARTS_PATTERN = re.compile(r"[-/]")


@dataclass(frozen=True)
class CleanOptions:  # pylint: disable=too-many-instance-attributes
    """What ``clean_parsed_data`` converts and removes.

    Attributes:
        convert_numbers: ``"42"`` -> ``42``, ``"4.2"`` -> ``4.2``.
        convert_booleans: ``"true"``/``"false"`` -> ``True``/``False``.
        convert_dates: ISO timestamps (``2024-01-31T10:00:00.000Z``) and the
            ``custom_date_formats`` -> ``datetime``.
        custom_date_formats: Any of ``"DD/MM/YYYY"``, ``"MM/DD/YYYY"``.
        remove_nulls: Drop ``null`` values from objects and arrays.
        remove_empty_objects: Drop objects left empty.
        remove_empty_arrays: Drop arrays left empty.
        strict_mode: Drop every scalar that no selected conversion applied to.
    """

    convert_numbers: bool = False
    convert_booleans: bool = False
    convert_dates: bool = False
    custom_date_formats: tuple[str, ...] = field(default_factory=tuple)
    remove_nulls: bool = False
    remove_empty_objects: bool = False
    remove_empty_arrays: bool = False
    strict_mode: bool = False

    def __post_init__(self) -> None:
        unsupported = [f for f in self.custom_date_formats if f not in SUPPORTED_DATE_FORMATS]
        if unsupported:
            raise ValueError(
                f"Unsupported date format(s) {unsupported}; "
                f"expected any of {list(SUPPORTED_DATE_FORMATS)}."
            )
        object.__setattr__(self, "custom_date_formats", tuple(self.custom_date_formats))


class _Removed:  # pylint: disable=too-few-public-methods
    """Marker for values dropped during cleaning."""


_REMOVED = _Removed()


def parse_custom_date(text: str, fmt: str) -> datetime | None:
    """Parse ``text`` as a day/month/year date.

    ``-`` and ``/`` are both accepted as separators. When the value cannot be
    valid in ``fmt`` but is valid with day and month swapped (e.g.
    ``"12/31/2024"`` with ``"DD/MM/YYYY"``), the swapped reading is used.

    Args:
        text: The date string, e.g. ``"31/12/2024"``.
        fmt: ``"DD/MM/YYYY"`` or ``"MM/DD/YYYY"``.

    Returns:
        A naive ``datetime`` at midnight, or ``None`` if ``text`` is not a date.

    Raises:
        TypeError: If ``text`` or ``fmt`` is not a string.
        ValueError: If ``fmt`` is not a supported format.
    """
    if not isinstance(text, str) or not isinstance(fmt, str):
        raise TypeError("'text' and 'fmt' must be strings.")
    if fmt not in SUPPORTED_DATE_FORMATS:
        raise ValueError(f"Unsupported date format {fmt!r}.")

    parts = DATE_PARTS_PATTERN.split(text.strip())
    if len(parts) != 3 or not all(part.isdecimal() for part in parts):
        return None

    first, second, year = (int(part) for part in parts)
    day, month = (first, second) if fmt == DMY_FORMAT else (second, first)
    if month > 12:
        day, month = month, day

    try:
        return datetime(year, month, day)
    except ValueError:
        return None


def _convert_string(text: str, options: CleanOptions) -> Any:
    trimmed = text.strip()

    if options.convert_numbers and NUMBER_PATTERN.fullmatch(trimmed):
        return int(trimmed) if INTEGER_PATTERN.fullmatch(trimmed) else float(trimmed)

    if options.convert_booleans and trimmed in ("true", "false"):
        return trimmed == "true"

    if options.convert_dates:
        if ISO_TIMESTAMP_PATTERN.fullmatch(trimmed):
            try:
                return datetime.fromisoformat(trimmed.replace("Z", "+00:00"))
            except ValueError:
                # The pattern accepts impossible dates such as 2024-02-30
                logger.debug("Ignoring invalid ISO timestamp %r", trimmed)
        for fmt in options.custom_date_formats:
            if (parsed := parse_custom_date(trimmed, fmt)) is not None:
                return parsed

    return _REMOVED if options.strict_mode else trimmed


def _clean(data: Any, options: CleanOptions) -> Any:
    if data is None:
        return _REMOVED if options.remove_nulls else None

    if isinstance(data, list):
        items = [item for item in (_clean(x, options) for x in data) if item is not _REMOVED]
        if options.remove_empty_arrays and not items:
            return _REMOVED
        return items

    if isinstance(data, dict):
        cleaned = {}
        for key, value in data.items():
            if (item := _clean(value, options)) is not _REMOVED:
                cleaned[key] = item
        if options.remove_empty_objects and not cleaned:
            return _REMOVED
        return cleaned

    if isinstance(data, str):
        return _convert_string(data, options)

    return _REMOVED if options.strict_mode else data


def clean_parsed_data(data: Any, options: CleanOptions | None = None) -> Any:
    """Clean a parsed JSON structure.

    Strings are trimmed; conversions and removals follow ``options``. Values
    removed at the top level come back as ``None``.

    Raises:
        TypeError: If ``options`` is not a ``CleanOptions``.

    Example:
        ```py
        >>> clean_parsed_data({"a": " 42 ", "b": None}, CleanOptions(convert_numbers=True, remove_nulls=True))
        {'a': 42}
        ```
    """
    if options is None:
        options = CleanOptions()
    elif not isinstance(options, CleanOptions):
        raise TypeError(f"'options' must be CleanOptions or None, got {type(options).__name__}.")

    cleaned = _clean(data, options)
    return None if cleaned is _REMOVED else cleaned


def safe_json_parse(
    text: Any,
    options: CleanOptions | None = None,
    *,
    on_error: Callable[[Exception], None] | None = None,
    log_on_fail: bool = False,
) -> Any:
    """Parse JSON text without raising, then clean the result.

    Args:
        text: The JSON text. ``None`` and non-strings yield ``None``.
        options: Cleaning options, see ``clean_parsed_data``.
        on_error: Called with the decoding error when ``text`` is malformed.
        log_on_fail: Log malformed input at ERROR level.

    Returns:
        The cleaned value, or ``None`` if ``text`` could not be parsed.
    """
    if not isinstance(text, str):
        return None

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        if log_on_fail:
            logger.error("JSON parsing failed in safe_json_parse: %s", e)
        if on_error is not None:
            on_error(e)
        return None

    return clean_parsed_data(parsed, options)
