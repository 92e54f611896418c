"""Random string generation for low-stakes identifiers.

The characters are drawn with the non-cryptographic `random` module from a
pool derived from an MD5 of the current time and the document root. Use
`secrets` for anything security-sensitive (tokens, passwords, nonces).
"""

from __future__ import annotations

import hashlib
import random
import string
import time

from helperkit import config
from helperkit.errors import InvalidArgumentError

__all__ = ["generate_random"]

BASE35_DIGITS = string.digits + string.ascii_lowercase[:25]
DEFAULT_RNG = random.Random()


def _to_base(number: int, base: int) -> str:
    digits = []
    while number:
        number, rem = divmod(number, base)
        digits.append(BASE35_DIGITS[rem])
    return "".join(reversed(digits)) or "0"


def _seed_pool(numeric: bool, document_root: str) -> str:
    """Build the character pool: base-10 digits or base-35 alphanumerics."""
    digest = hashlib.md5(  # pragma: no mutate
        f"{time.time_ns()}{document_root}".encode(), usedforsecurity=False
    ).hexdigest()
    seed = _to_base(int(digest, 16), 10 if numeric else 35)
    if numeric:
        return seed.replace("0", "") + "012340567890"
    return seed + "zZ" + seed.upper()


def generate_random(
    length: int,
    numeric: bool = False,
    *,
    document_root: str | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a random string of exactly `length` characters.

    Args:
        length: Number of characters to return.
        numeric: Digits only when True; otherwise alphanumeric, starting with
            an ASCII letter.
        document_root: Seed component; defaults to `config.get_document_root()`.
        rng: Random generator to draw from; defaults to the `random` module.

    Returns:
        The generated string.

    Raises:
        InvalidArgumentError: If `length` is negative.
    """
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0, got {length}")
    if length == 0:
        return ""

    draw = rng or DEFAULT_RNG
    if document_root is None:
        document_root = config.get_document_root()
    pool = _seed_pool(bool(numeric), document_root)

    prefix = ""
    if not numeric:
        # 65-90 or 97-122
        prefix = chr(draw.randint(1, 26) + draw.randint(0, 1) * 32 + 64)
        length -= 1

    return prefix + "".join(draw.choice(pool) for _ in range(length))
