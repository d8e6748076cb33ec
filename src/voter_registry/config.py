"""Configuration for VOTER REGISTRY.

The only setting is the database URL, read from ``VOTER_REGISTRY_DB_URL``.
This module also builds the Alembic configuration pointing at the migration
scripts shipped inside the package, so no ``alembic.ini`` is needed.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "VOTER_REGISTRY_DB_URL"
ALEMBIC_URL_KEY = "sqlalchemy.url"
MIGRATIONS_PACKAGE = "voter_registry.adapters.db.alembic"


class DatabaseUrlNotSetError(Exception):
    """VOTER_REGISTRY_DB_URL is unset or empty."""


def get_db_url() -> str:
    """Return ``VOTER_REGISTRY_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    url = os.environ.get(DB_URL_ENV_VAR, "")
    if not url:
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Alembic `Config` for the packaged migrations.

    Args:
        db_url: Database URL handed to ``env.py``. Leave it out for commands
            that never connect; ``env.py`` then falls back to the environment.
        stdout: Where Alembic prints its status lines.

    Returns:
        Config: An in-memory config with ``script_location`` set.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
