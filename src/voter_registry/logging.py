"""Logging setup for the VOTER REGISTRY CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an optional "flight recorder": a ``MemoryHandler`` that keeps recent records
  at DEBUG and dumps them to a file when a WARNING (or worse) shows up, or on
  exit when force-flush is requested.

`configure_logging` wires both from a `LoggingSettings` and writes the startup
diagnostics.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import alembic
import sqlalchemy
from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

from voter_registry import __version__

PROJECT_LOGGER = "voter_registry"
APP_DIR_NAME = "voter-registry"
DEFAULT_LOG_FILENAME = "latest.log"
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

CONSOLE_FORMAT = "%(source_tag)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:  # pylint: disable=too-many-instance-attributes
    """Everything the CLI needs to know to set up logging."""

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    flight_recorder: bool = True
    log_path: Path | None = None
    flight_recorder_capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def console_level_from_counts(verbose: int, quiet: int) -> int:
    """Move one level below WARNING per -v and one above per -q, clamped."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


def default_log_path() -> Path:
    """Flight-recorder file under the per-user log directory."""
    log_dir = user_log_dir(APP_DIR_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / DEFAULT_LOG_FILENAME


class SourceTagFilter(logging.Filter):
    """Tag records from outside the project with their top-level package.

    ``sqlalchemy.engine.Engine`` becomes ``[sqlalchemy]``; project records get
    an empty tag. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.source_tag = "" if top == PROJECT_LOGGER else f"[{top}]"
        return True


def console_handler(
    level: int = logging.WARNING, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler.

    Debug mode forces DEBUG, adds timestamps and logger names, and shows the
    emitting source location.
    """
    # None lets click-extra's --no-color switch Rich off entirely
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(SourceTagFilter())
    return handler


def flight_recorder_handler(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a buffering handler that dumps to ``path``.

    Args:
        path: File receiving the buffered records. It is truncated on first
            write and not created at all if nothing is ever flushed.
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a dump.
        flush_on_close: Dump whatever is buffered when the handler closes.

    Returns:
        MemoryHandler: The recorder, targeting a file handler.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console and flight-recorder handlers on the root logger.

    The root logger is opened to DEBUG; filtering happens per handler so the
    flight recorder sees everything regardless of console verbosity. Levels in
    ``settings.logger_levels`` are then applied to their named loggers.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(settings.console_level, settings.debug, settings.color)
    ]
    log_path = settings.log_path
    if settings.flight_recorder:
        log_path = log_path or default_log_path()
        handlers.append(
            flight_recorder_handler(
                log_path,
                capacity=settings.flight_recorder_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    _log_startup(settings, handlers, log_path)
    return handlers


def _log_startup(
    settings: LoggingSettings, handlers: list[logging.Handler], log_path: Path | None
) -> None:
    logger = logging.getLogger(PROJECT_LOGGER)
    logger.info(
        "VOTER REGISTRY %s (console=%s, flight-recorder=%s)",
        __version__,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )
    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Alembic": alembic.__version__,
        "SQLAlchemy": sqlalchemy.__version__,
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in diagnostics.items():
        logger.debug("%s: %s", key, value)
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            settings.flight_recorder_capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
