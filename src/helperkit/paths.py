"""Path helpers: separator normalization, date-based paths and directory creation."""

from __future__ import annotations

import logging
import os
import re
import time
from pathlib import Path

from helperkit.config import DEFAULT_DIR_PERMISSION
from helperkit.dates import timestamp_to_date

__all__ = ["get_path_by_date", "make_file_path", "make_path", "trim_path"]

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]

SEPARATOR_RUN = re.compile(r"[/\\]+")


def trim_path(path: str, sep: str = os.sep) -> str:
    """Normalize every ``/`` and ``\\`` (single or repeated) to `sep`.

    Runs of separators collapse to a single one, so the result is stable
    under repeated application. No filesystem access.
    """
    return SEPARATOR_RUN.sub(lambda _: sep, path)


def get_path_by_date(timestamp: int | None = None) -> str:
    """Return a ``Year/Month/Day/`` relative path for `timestamp` (default: now)."""
    if timestamp is None:
        timestamp = int(time.time())
    return trim_path(timestamp_to_date(timestamp, "%Y/%m/%d/"))


def make_path(path: PathLike, permission: int = DEFAULT_DIR_PERMISSION) -> bool:
    """Create a directory and any missing parents.

    Every directory created gets `permission` (still subject to the umask).

    Args:
        path: Directory to create.
        permission: Mode bits for the created directories.

    Returns:
        True if the directory exists afterwards, False if `path` is occupied
        by something else or creation failed.
    """
    target = Path(path)
    if target.is_dir():
        return True
    if target.exists():
        logger.warning("Cannot create directory %s: path exists and is not a directory", target)
        return False

    missing = [target]
    missing.extend(p for p in target.parents if not p.exists())
    try:
        for directory in reversed(missing):
            directory.mkdir(mode=permission, exist_ok=True)
    except OSError as e:
        logger.warning("Cannot create directory %s: %s", target, e)
        return False

    logger.debug("Created directory %s", target)
    return True


def make_file_path(file_path: PathLike, permission: int = DEFAULT_DIR_PERMISSION) -> bool:
    """Create the parent directory of `file_path`; see `make_path`."""
    return make_path(Path(file_path).parent, permission)
