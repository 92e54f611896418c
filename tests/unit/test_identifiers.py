"""Unit tests for helperkit.identifiers."""

import random
import re
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from helperkit import identifiers
from helperkit.config import DOCUMENT_ROOT_ENV
from helperkit.errors import InvalidArgumentError
from helperkit.identifiers import generate_random

# pylint: disable=magic-value-comparison

ALNUM = re.compile(r"[A-Za-z][0-9A-Za-z]*")
NUMERIC = re.compile(r"[0-9]+")


def test_alphanumeric_length_and_first_letter():
    """Alphanumeric strings have the exact length and start with a letter."""
    value = generate_random(12)
    assert len(value) == 12
    assert ALNUM.fullmatch(value)


def test_numeric_digits_only():
    """Numeric strings contain digits only."""
    value = generate_random(10, True)
    assert len(value) == 10
    assert NUMERIC.fullmatch(value)


@pytest.mark.property
@given(length=st.integers(min_value=1, max_value=80), numeric=st.booleans())
def test_length_is_exact(length, numeric):
    """Every requested length is honoured in both modes."""
    value = generate_random(length, numeric)
    assert len(value) == length
    assert (NUMERIC if numeric else ALNUM).fullmatch(value)


def test_single_character_is_a_letter():
    """Length 1 yields just the forced leading letter."""
    assert generate_random(1) in string.ascii_letters


def test_zero_length():
    """Length 0 yields an empty string."""
    assert generate_random(0) == ""
    assert generate_random(0, True) == ""


def test_negative_length():
    """Negative lengths are a contract violation."""
    with pytest.raises(InvalidArgumentError):
        generate_random(-1)


def test_injected_rng_is_used():
    """Draws come from the injected generator."""
    pool_calls = []

    class RecordingRandom(random.Random):
        def choice(self, seq):
            pool_calls.append(seq)
            return super().choice(seq)

    generate_random(5, rng=RecordingRandom(1), document_root="/srv/www")
    assert len(pool_calls) == 4


def test_alphanumeric_pool_shape():
    """The alphanumeric pool mixes the base-35 seed with an upper-cased copy."""
    pool = identifiers._seed_pool(False, "/srv/www")  # pylint: disable=protected-access
    seed, upper = pool.split("zZ")
    assert upper == seed.upper()
    assert re.fullmatch(r"[0-9a-y]+", seed)


def test_numeric_pool_shape():
    """The numeric pool drops zeros from the seed and appends a fixed tail."""
    pool = identifiers._seed_pool(True, "")  # pylint: disable=protected-access
    assert pool.endswith("012340567890")
    assert "0" not in pool[: -len("012340567890")]


def test_document_root_from_environment(monkeypatch: pytest.MonkeyPatch):
    """The configured document root feeds the seed."""
    seen = []
    monkeypatch.setenv(DOCUMENT_ROOT_ENV, "/var/www/site")
    monkeypatch.setattr(
        identifiers, "_seed_pool", lambda numeric, root: seen.append(root) or "0123"
    )
    assert NUMERIC.fullmatch(generate_random(6, True))
    assert seen == ["/var/www/site"]
