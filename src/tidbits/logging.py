"""Logging setup for the tidbits command line.

Console output goes through Rich on stderr. An optional in-memory "flight
recorder" keeps the most recent records (at every level) and writes them to a
file once something at WARNING or above is logged, so a failing
``tidbits currency format`` run can be diagnosed after the fact.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "tidbits"
DIAGNOSED_DISTRIBUTIONS = ("click", "click-extra", "rich", "platformdirs")
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short ``[name]`` prefix.

    Records from ``tidbits.*`` loggers get an empty prefix. The filter never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum console level (forced to DEBUG in ``debug_mode``).
        debug_mode: Show timestamps, logger names and source locations.
        color: Follows click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a ``MemoryHandler`` in front of a file.

    Args:
        path: File the buffered records are written to (truncated on open).
        capacity: Number of records kept in memory.
        flush_level: Records at this level or above flush the buffer.
        flush_on_close: Also flush whatever is buffered on close.

    Returns:
        MemoryHandler: The buffering handler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and environment diagnostics at DEBUG.

    Args:
        logger: Logger used to emit the messages.
        app_version: The tidbits version.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight recorder file, if any.
        flight_recorder: Whether the flight recorder is on.
        flight_capacity: Flight recorder buffer size, if on.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Per-logger level overrides.
    """
    logger.info(
        "TIDBITS %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for name in DIAGNOSED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")  # pragma: no cover
