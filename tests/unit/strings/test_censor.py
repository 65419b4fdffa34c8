"""Unit tests for `tidbits.strings.censor`."""

import random

import pytest

from tidbits.strings import CensorMode, InvalidCensorModeError, censor_email


def _parts(censored: str) -> tuple[str, str, str]:
    local, _, domain = censored.partition("@")
    name, _, tld = domain.partition(".")
    return local, name, tld


@pytest.mark.parametrize("mode", ["random", "fixed", CensorMode.RANDOM, CensorMode.FIXED])
def test_censors_each_part_by_its_share(mode):
    """60% of the local part, 50% of the domain and 40% of a long TLD are masked."""
    local, name, tld = _parts(censor_email("john.doe@example.com", mode))
    assert (len(local), len(name), len(tld)) == (8, 7, 3)
    assert local.count("*") == 5
    assert name.count("*") == 4
    assert tld.count("*") == 2


def test_unmasked_characters_are_kept_in_place():
    """Characters that are not masked keep their original positions."""
    original = "john.doe@example.com"
    censored = censor_email(original, "fixed")
    assert len(censored) == len(original)
    for before, after in zip(original, censored):
        assert after in (before, "*")


def test_fixed_mode_is_deterministic():
    """The same address always censors the same way in fixed mode."""
    first = censor_email("someone@example.org", "fixed")
    assert first == censor_email("someone@example.org", "fixed")


def test_random_mode_uses_the_given_rng():
    """A seeded random source makes random mode reproducible."""
    a = censor_email("someone@example.org", rng=random.Random(7))
    b = censor_email("someone@example.org", rng=random.Random(7))
    assert a == b


@pytest.mark.parametrize(
    ("email", "expected"),
    [("ab@c.io", "**@*.io"), ("a@b.co", "*@*.co")],
)
def test_short_parts_are_fully_masked(email, expected):
    """Parts no longer than the minimum are starred entirely; 2-letter TLDs are kept."""
    assert censor_email(email, "fixed") == expected


def test_fixed_mode_terminates_when_step_divides_length():
    """A 31-character local part (the walk step) still gets its share masked."""
    local = "a" * 31
    censored = censor_email(f"{local}@example.com", "fixed")
    assert censored.partition("@")[0].count("*") == 19


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "@example.com", "", None, 42])
def test_invalid_email(email):
    """Invalid addresses and non-strings give an empty string."""
    assert censor_email(email) == ""


def test_invalid_mode():
    """An unknown mode raises, also as a ValueError."""
    with pytest.raises(InvalidCensorModeError) as exc:
        censor_email("john@example.com", "sometimes")
    assert isinstance(exc.value, ValueError)
    assert exc.value.mode == "sometimes"
