"""Email address censoring for display.

Masks a share of the characters of the local part, the domain name and (when
longer than two characters) the top-level domain with ``*``. In ``fixed`` mode
the masked positions are derived from a hash of the address so the same email
always renders the same way; in ``random`` mode they change on every call.
"""

from __future__ import annotations

import math
import random
import re
from enum import Enum
from typing import Any

from .errors import InvalidCensorModeError

MASK = "*"
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

LOCAL_SHARE = 0.6
DOMAIN_SHARE = 0.5
TLD_SHARE = 0.4
FIXED_STEP = 31


class CensorMode(Enum):
    """Enumeration of censoring modes.

    Modes:
    - RANDOM: masked positions are drawn at random.
    - FIXED: masked positions are derived from a hash of the address.
    """

    RANDOM = "random"
    FIXED = "fixed"


def _string_hash(text: str) -> int:
    """Absolute value of the classic ``h * 31 + c`` hash, wrapped to signed 32 bits."""
    value = 0
    for char in text:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def _censor(
    part: str, min_censor: int, share: float, seed: int | None, rng: random.Random
) -> str:
    size = len(part)
    if size <= min_censor:
        return MASK * size

    total = max(min_censor, math.ceil(size * share))
    positions: set[int] = set()
    i = 0
    while len(positions) < total:
        if seed is None:
            positions.add(rng.randrange(size))
        else:
            # i // size shifts the walk when FIXED_STEP divides size
            positions.add((seed + size + i * FIXED_STEP + i // size) % size)
        i += 1

    chars = list(part)
    for index in positions:
        chars[index] = MASK
    return "".join(chars)


def censor_email(
    email: Any,
    mode: CensorMode | str = CensorMode.RANDOM,
    *,
    rng: random.Random | None = None,
) -> str:
    """Mask part of an email address.

    Args:
        email: The address to censor.
        mode: ``"random"`` (default) or ``"fixed"`` (deterministic per address).
        rng: Random source for ``random`` mode; a fresh one is used if omitted.

    Returns:
        The censored address, or ``""`` when ``email`` is not a string or not a
        valid address.

    Raises:
        InvalidCensorModeError: If ``mode`` is not 'random' or 'fixed'.

    Example:
        ```py
        >>> censor_email("john.doe@example.com", "fixed").count("@")
        1
        >>> censor_email("not-an-email")
        ''
        ```
    """
    try:
        mode = CensorMode(mode)
    except ValueError as e:
        raise InvalidCensorModeError(mode) from e

    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        return ""

    local, _, domain = email.partition("@")
    domain_name, _, tld = domain.partition(".")
    if not domain_name or not tld:
        return ""

    seed = _string_hash(email) if mode is CensorMode.FIXED else None
    rng = rng or random.Random()

    censored_local = _censor(local, 1 if len(local) < 4 else 2, LOCAL_SHARE, seed, rng)
    censored_domain = _censor(
        domain_name, 1 if len(domain_name) < 4 else 2, DOMAIN_SHARE, seed, rng
    )
    censored_tld = tld if len(tld) <= 2 else _censor(tld, 1, TLD_SHARE, seed, rng)

    return f"{censored_local}@{censored_domain}.{censored_tld}"
