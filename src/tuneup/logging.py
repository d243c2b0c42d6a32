"""Logging helpers used by TuneUp sessions.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk when a test fails. It also provides a filter that annotates
third-party log records with a short prefix used by console formatting.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from tuneup import __version__

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "tuneup"

logger = logging.getLogger(__name__)


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach a prefix to the record and allow it through.

        Args:
            record: The LogRecord being processed.

        Returns:
            bool: Always True (record is not filtered out).
        """
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes source file/line information; otherwise a short third-party
    prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
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

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.ERROR,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to the file when a record at `flush_level` or higher is emitted
    (a failing test logs at ERROR), or on close if `flush_on_close` is True.

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(
    log: Logger,
    *,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush: bool,
) -> None:
    """Log a one-line summary and DEBUG diagnostics about the environment.

    Args:
        log: Logger used to emit startup messages.
        level: Effective console logging level (numeric).
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None when it is disabled.
        flight_capacity: Flight-recorder buffer capacity, or None.
        force_flush: Whether the flight recorder flushes on close.
    """
    log.info(
        "TUNEUP %s: console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(level),
        "ON" if log_path else "OFF",
    )
    log.debug("Python: %s", sys.version.split()[0])
    log.debug("Platform: %s %s", platform.system(), platform.release())
    log.debug("PID: %s", os.getpid())
    log.debug("CWD: %s", Path.cwd())
    log.debug("Rich: %s", version("rich"))
    log.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if log_path:
        log.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            flight_capacity,
            force_flush,
        )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int = 2000,
    force_flush: bool = False,
) -> list[logging.Handler]:
    """Attach the console handler and, if *log_path* is set, a flight recorder.

    The root logger is set to DEBUG so the flight recorder sees everything;
    each handler filters on its own level. Existing root handlers are replaced.

    Args:
        level: Minimum level for console output.
        debug_mode: Enable debug formatting and DEBUG console output.
        color: Enable color output when True.
        log_path: Flight-recorder file; ``None`` disables the flight recorder.
        flight_capacity: Number of records the flight recorder buffers.
        force_flush: Flush the flight recorder when its handler is closed.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    log_startup(
        logger,
        level=logging.DEBUG if debug_mode else level,
        handlers=handlers,
        log_path=log_path,
        flight_capacity=flight_capacity if log_path is not None else None,
        force_flush=force_flush,
    )
    return handlers
