"""Logging setup for programs that use helperkit.

`configure_logging` puts a Rich console handler on the root logger and,
optionally, a flight recorder: a memory buffer that is written to
`config.get_log_path()` once a warning is logged. Console lines from other
packages carry a ``[package]`` tag.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import xxhash
from rich.console import Console
from rich.logging import RichHandler

from helperkit import __version__, config

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "helperkit"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)

logger = logging.getLogger(__name__)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside `project` with their top-level package.

    ``urllib3.connectionpool`` becomes ``[urllib3]``; records from `project`
    or one of its submodules get an empty prefix. Nothing is filtered out.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def _is_project(self, name: str) -> bool:
        return name == self.project or name.startswith(f"{self.project}.")

    def filter(self, record: logging.LogRecord) -> bool:
        if self._is_project(record.name):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    project: str = PROJECT_PREFIX,
) -> RichHandler:
    """Build the stderr RichHandler.

    Debug mode lowers the level to DEBUG and shows timestamps, logger names
    and source paths. Otherwise records are tagged by `ThirdPartyPrefixFilter`
    so output from libraries stands out from `project`'s own.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter(project))
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Buffer up to `capacity` records and write them to `path` on a WARNING.

    The file is truncated when the handler is built, so it only ever holds
    the latest run. With `flush_on_close` the buffer is also written when
    the handler closes, warning or not.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    level: int = logging.WARNING,
    *,
    debug: bool = False,
    color: bool = True,
    flight_recorder: bool = False,
    log_path: Path | None = None,
    flight_recorder_capacity: int = 2000,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install console (and optionally flight-recorder) handlers on the root logger.

    Args:
        level: Console level (ignored in debug mode).
        debug: Enable debug console formatting.
        color: Enable colored console output.
        flight_recorder: Attach the in-memory flight recorder.
        log_path: Flight-recorder destination; defaults to `config.get_log_path()`.
        flight_recorder_capacity: Records buffered by the flight recorder.
        force_flush: Flush the flight recorder on close even without warnings.
        logger_levels: Per-logger levels; defaults to `config.get_logger_levels()`.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=color)
    ]

    if flight_recorder:
        log_path = log_path or config.get_log_path()
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    if logger_levels is None:
        logger_levels = config.get_logger_levels()
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        logger_levels=logger_levels,
    )
    return handlers


def log_startup(
    log: Logger,
    *,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary and DEBUG diagnostics about the logging setup."""

    log.info(
        "HELPERKIT %s: console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(level),
        "ON" if flight_capacity is not None else "OFF",
    )

    log.debug("Python: %s", sys.version.split()[0])
    log.debug("Platform: %s %s", platform.system(), platform.release())
    log.debug("PID: %s", os.getpid())
    log.debug("xxhash: %s", xxhash.VERSION)
    log.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_capacity is not None:
        log.debug(
            "Flight recorder: path=%s, capacity=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
        )
    log.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
