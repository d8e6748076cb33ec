"""Parsing of the ``-L/--logger-level NAME=LEVEL`` CLI option.

The option is repeatable, and its environment variable may hold several
comma- or space-separated pairs. Third-party libraries that are chatty at
DEBUG (SQLAlchemy, Alembic) default to WARNING unless overridden.
"""

import logging
import re
from collections.abc import Iterable

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | Iterable[str]) -> list[str]:
    """Flatten a plain string or a sequence of strings into NAME=LEVEL items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name -> level mapping.

    Later pairs win over earlier ones, and every pair wins over
    DEFAULT_LIB_LEVELS. Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_str.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = level
    return levels
