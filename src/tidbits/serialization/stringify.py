"""Deterministic, crash-free JSON stringification.

``safe_stable_stringify`` produces the same text for structurally equal values
(keys sorted by default) and never raises on awkward input: callables are
dropped, non-finite floats become ``null``, dates become ISO-8601 strings,
sets are wrapped as ``{"set": [...]}`` and reference cycles are replaced by
``"[Circular]"``.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Set
from dataclasses import fields, is_dataclass
from datetime import date, time
from typing import Any

logger = logging.getLogger(__name__)

CIRCULAR_MARKER = "[Circular]"
FALLBACK_JSON = "{}"
PRETTY_INDENT = 2


class _Omit:  # pylint: disable=too-few-public-methods
    """Marker for values that must not appear in the output (callables)."""


_OMIT = _Omit()


def _is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def _primitive_sort_key(value: Any) -> str:
    # compares the way the values read once serialized
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def safe_stable_stringify(
    value: Any,
    *,
    sort_keys: bool = True,
    ignore_order: bool = False,
    pretty: bool = False,
) -> str:
    """Serialize ``value`` to JSON deterministically.

    Args:
        value: Anything.
        sort_keys: Sort mapping keys (default True).
        ignore_order: Sort the primitive members of every list and place them
            before the non-primitive members, so lists that differ only in
            order serialize identically (default False).
        pretty: Indent the output by two spaces (default False).

    Returns:
        The JSON text, or ``"{}"`` if serialization fails unexpectedly (the
        failure is logged at WARNING).

    Raises:
        TypeError: If ``sort_keys``, ``ignore_order`` or ``pretty`` is not a bool.

    Example:
        ```py
        >>> safe_stable_stringify({"b": 1, "a": [3, float("nan")]})
        '{"a":[3,null],"b":1}'
        ```
    """
    for name, flag in (("sort_keys", sort_keys), ("ignore_order", ignore_order), ("pretty", pretty)):
        if not isinstance(flag, bool):
            raise TypeError(f"Expected '{name}' to be a bool, got {type(flag).__name__}.")

    ancestors: set[int] = set()

    def process(val: Any) -> Any:  # pylint: disable=too-many-return-statements
        if isinstance(val, float) and not math.isfinite(val):
            return None
        if _is_primitive(val):
            return val
        if isinstance(val, (date, time)):
            return val.isoformat()
        if callable(val):
            return _OMIT

        if id(val) in ancestors:
            return CIRCULAR_MARKER
        ancestors.add(id(val))
        try:
            return process_container(val)
        finally:
            ancestors.discard(id(val))

    def process_container(val: Any) -> Any:
        if isinstance(val, Mapping):
            return process_mapping(val)
        if isinstance(val, Set):
            return {"set": [process_item(item) for item in val]}
        if isinstance(val, (list, tuple)):
            items = [process_item(item) for item in val]
            if ignore_order:
                primitives = sorted(filter(_is_primitive, items), key=_primitive_sort_key)
                return primitives + [item for item in items if not _is_primitive(item)]
            return items
        if is_dataclass(val):
            return process_mapping({f.name: getattr(val, f.name) for f in fields(val)})
        if hasattr(val, "__dict__"):
            return process_mapping(vars(val))
        return str(val)

    def process_item(item: Any) -> Any:
        processed = process(item)
        return None if processed is _OMIT else processed

    def process_mapping(val: Mapping[Any, Any]) -> dict[str, Any]:
        keys = list(val)
        if sort_keys:
            keys.sort(key=str)
        result: dict[str, Any] = {}
        for key in keys:
            processed = process(val[key])
            if processed is not _OMIT:
                result[str(key)] = processed
        return result

    try:
        processed = process(value)
        if processed is _OMIT:
            processed = None
        if pretty:
            return json.dumps(processed, indent=PRETTY_INDENT, ensure_ascii=False)
        return json.dumps(processed, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("safe_stable_stringify failed, returning %s: %s", FALLBACK_JSON, e)
        return FALLBACK_JSON
