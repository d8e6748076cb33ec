"""Alembic environment for VOTER REGISTRY.

The database URL is taken from the first of these that is set:

1. ``alembic -x url=...``
2. ``sqlalchemy.url`` in the Alembic config (what `build_alembic_config` sets)
3. the ``VOTER_REGISTRY_DB_URL`` environment variable

Type and server-default drift are compared on autogenerate. SQLite runs in
batch mode so ALTER TABLE can be emulated.
"""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from voter_registry.adapters.db.metadata import metadata
from voter_registry.adapters.registry_repository import schema  # noqa: F401
from voter_registry.config import ALEMBIC_URL_KEY, DB_URL_ENV_VAR

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def _is_set(url: str | None) -> bool:
    # an unrendered ini placeholder such as "%(DB_URL)s" counts as unset
    return bool(url) and "%(" not in url


def resolve_url() -> str:
    """Return the first configured database URL."""
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        config.get_main_option(ALEMBIC_URL_KEY),
        os.environ.get(DB_URL_ENV_VAR),
    )
    for url in candidates:
        if _is_set(url):
            return url
    raise RuntimeError(f"Set {DB_URL_ENV_VAR} to your database URL.")


def run_migrations_offline() -> None:
    """Emit the migration SQL to the script output without connecting."""
    context.configure(
        url=resolve_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run the migrations over a live connection."""
    engine = engine_from_config(
        {ALEMBIC_URL_KEY: resolve_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
