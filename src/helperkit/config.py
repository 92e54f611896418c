"""Configuration utilities for HELPERKIT.

This module centralizes the environment-driven defaults consumed by the
helpers (default timezone, document root, log locations). Values are read on
every call so tests can override them with ``monkeypatch.setenv``.
"""

import logging
import os
import re
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "helperkit"

TIMEZONE_ENV = "HELPERKIT_TIMEZONE"  # pragma: no mutate
DOCUMENT_ROOT_ENV = "DOCUMENT_ROOT"  # pragma: no mutate
LOG_PATH_ENV = "HELPERKIT_LOG_PATH"  # pragma: no mutate
LOGGER_LEVELS_ENV = "HELPERKIT_LOGGER_LEVELS"  # pragma: no mutate

DEFAULT_TIMEZONE = "UTC"
DEFAULT_DIR_PERMISSION = 0o755


class ConfigError(Exception):
    """Raised when an environment setting cannot be parsed."""


def get_default_timezone() -> str:
    """Get the default timezone identifier.

    Returns:
        The value of `HELPERKIT_TIMEZONE`, or ``"UTC"`` when it is unset or empty.
        The identifier is not validated here; callers resolve it.
    """
    return os.environ.get(TIMEZONE_ENV) or DEFAULT_TIMEZONE


def get_document_root() -> str:
    """Get the web document root, used only to vary random seeds."""
    return os.environ.get(DOCUMENT_ROOT_ENV, "")


def get_log_path() -> Path:
    """Get the flight-recorder log file path.

    Returns:
        `HELPERKIT_LOG_PATH` when set, otherwise ``latest.log`` inside the
        per-user log directory (created on demand).
    """
    if path := os.environ.get(LOG_PATH_ENV):
        return Path(path)
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


def parse_logger_levels(value: str | list[str] | tuple[str, ...]) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Accepts a single string (items separated by commas and/or whitespace) or a
    sequence of such strings. Later entries override earlier ones.

    Args:
        value: The raw setting value(s).

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        ConfigError: If an item is not NAME=LEVEL or LEVEL is not a level name.
    """
    raw = [value] if isinstance(value, str) else list(value)
    items = [s for v in raw for s in re.split(r"[,\s]+", v) if s]

    levels: dict[str, int] = {}
    for item in items:
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise ConfigError(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise ConfigError(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def get_logger_levels() -> dict[str, int]:
    """Get per-logger level overrides from `HELPERKIT_LOGGER_LEVELS`."""
    return parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, ""))
