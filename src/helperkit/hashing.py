"""xxHash digests for strings, bytes and files.

A thin pass-through to the `xxhash` library. The algorithm is selected by
name; unknown names and unreadable files are reported as ``None``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any

import xxhash

__all__ = ["SUPPORTED_ALGORITHMS", "xx_hash", "xx_hash_file"]

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

SUPPORTED_ALGORITHMS: dict[str, Callable[..., Any]] = {
    "xxh32": xxhash.xxh32,
    "xxh64": xxhash.xxh64,
    "xxh3": xxhash.xxh3_64,
    "xxh128": xxhash.xxh3_128,
}


def _new_hasher(algorithm: str, seed: int) -> Any | None:
    factory = SUPPORTED_ALGORITHMS.get(algorithm.lower())
    if factory is None:
        logger.warning("Unsupported hash algorithm %r", algorithm)
        return None
    # seed 0 is the algorithms' default
    return factory(seed=seed)


def xx_hash(data: bytes | str, seed: int = 0, algorithm: str = "xxh64") -> str | None:
    """Return the lowercase hex digest of `data`.

    Args:
        data: Bytes, or text (encoded as UTF-8).
        seed: Hash seed; 0 uses the default seed.
        algorithm: ``xxh32``, ``xxh64``, ``xxh3`` or ``xxh128``.

    Returns:
        The hex digest, or None if the algorithm is not supported.
    """
    hasher = _new_hasher(algorithm, seed)
    if hasher is None:
        return None
    hasher.update(data.encode("utf-8") if isinstance(data, str) else data)
    return hasher.hexdigest()


def xx_hash_file(
    file_path: str | os.PathLike[str], seed: int = 0, algorithm: str = "xxh64"
) -> str | None:
    """Return the lowercase hex digest of a file's contents.

    The file is read in 1 MiB chunks.

    Returns:
        The hex digest, or None if the algorithm is not supported or the file
        cannot be read.
    """
    hasher = _new_hasher(algorithm, seed)
    if hasher is None:
        return None
    try:
        with open(file_path, "rb") as fileobj:
            for chunk in iter(lambda: fileobj.read(CHUNK_SIZE), b""):
                hasher.update(chunk)
    except OSError as e:
        logger.warning("Cannot hash %s: %s", file_path, e)
        return None
    return hasher.hexdigest()
