"""VOTER REGISTRY DB CLI: schema setup and maintenance.

Behavior
- ``init`` creates the ``person`` table if it is missing and records the
  Alembic head revision on a database that has none yet, so a quick-start
  database can later move on with ``upgrade``. Idempotent.
- ``upgrade``/``current`` wrap Alembic for managed, forward-only migrations.
  Downgrades are intentionally omitted.
- ``status`` reports reachability, backend, sanitized URL and record count.
- ``reset`` deletes every registered voter after confirmation.

Human-oriented notices go to **stderr**; Alembic output goes to **stdout**.

Requirements
- ``VOTER_REGISTRY_DB_URL`` must be set.

Failure modes
- Missing/invalid ``VOTER_REGISTRY_DB_URL``, an unreachable DB, or a failing
  migration → ``ClickException`` with guidance.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from sqlalchemy.exc import DBAPIError

from voter_registry import config
from voter_registry.interfaces.registry_repository import (
    RegistryRepositoryError,
    SchemaError,
)

from .helpers import open_repository, resolve_db_url, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

RESET_WARNING = "This will delete every registered voter."

UNINITIALIZED_INSTRUCTIONS = (
    "Run 'voter-registry db init' or 'voter-registry db upgrade' to create the schema."
)

UNVERSIONED_SCHEMA_HINT = (
    "If the schema was created before its revision was recorded, run "
    "'voter-registry db init' once, then upgrade again."
)


def _current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create the registry schema if it does not exist."""
    url = resolve_db_url()
    repository = open_repository(ctx, url)
    try:
        repository.init_schema()
        if _current_revision(repository.engine) is None:
            cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
            command.stamp(cfg, "head")
    except RegistryRepositoryError as e:
        raise click.ClickException(f"Could not initialize schema: {e}") from e
    except DBAPIError as e:
        raise click.ClickException(
            f"Could not record the schema revision: {e.orig or e}"
        ) from e
    success("Schema initialized.")


@db.command()
@click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=resolve_db_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = resolve_db_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True)
    try:
        command.upgrade(cfg, revision="head", sql=sql)
    except DBAPIError as e:
        raise click.ClickException(
            f"Upgrade failed: {e.orig or e}\n{UNVERSIONED_SCHEMA_HINT}"
        ) from e
    success("Upgrade complete!")


@db.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show database connection and registry status."""
    url = resolve_db_url()
    repository = open_repository(ctx, url)
    success("Database reachable")
    click.echo(f"Backend : {repository.engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    try:
        count = repository.count()
    except SchemaError:
        click.echo("Schema  : uninitialized")
        warn(UNINITIALIZED_INSTRUCTIONS)
        return
    except RegistryRepositoryError as e:
        raise click.ClickException(f"Could not read the registry: {e}") from e
    click.echo("Schema  : ready")
    click.echo(f"Voters  : {count}")


@db.command()
@click.option("--force", is_flag=True, help="Reset without confirmation.")
@click.pass_context
def reset(ctx: click.Context, force: bool) -> None:
    """Delete every registered voter."""
    url = resolve_db_url()
    if not force:
        warn(RESET_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True)
    try:
        open_repository(ctx, url).delete_all()
    except RegistryRepositoryError as e:
        raise click.ClickException(f"Could not reset registry: {e}") from e
    success("Registry cleared.")
