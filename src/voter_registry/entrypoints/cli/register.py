"""Registration commands for the VOTER REGISTRY CLI.

``register`` runs the registration use case for a single person and prints
the outcome name (``VALID``, ``INVALID``, ``UNDERAGE``, ``DEAD`` or
``DUPLICATED``) on stdout. The exit code is 0 only for ``VALID``, so scripts
can branch on it without parsing output. Storage failures are not outcomes:
they surface as a ``ClickException`` (exit code 1 with a message on stderr).

``lookup`` prints the stored record for an identifier.
"""

from __future__ import annotations

import click

from voter_registry.bootstrap import bootstrap
from voter_registry.domain import Gender, Person
from voter_registry.interfaces.registry_repository import (
    RegistryRepositoryError,
    SchemaError,
)

from .db import UNINITIALIZED_INSTRUCTIONS
from .helpers import error, open_repository, resolve_db_url

REJECTED_EXIT_CODE = 1


def _storage_failure(e: RegistryRepositoryError) -> click.ClickException:
    if isinstance(e, SchemaError):
        return click.ClickException(f"{e}\n{UNINITIALIZED_INSTRUCTIONS}")
    return click.ClickException(f"Storage error: {e}")


@click.command()
@click.argument("name")
@click.option("--id", "person_id", type=int, required=True, help="Person identifier.")
@click.option("--age", type=int, required=True, help="Age in years.")
@click.option(
    "--gender",
    type=click.Choice([g.name for g in Gender], case_sensitive=False),
    required=True,
    help="Recorded gender.",
)
@click.option(
    "--alive/--dead",
    default=True,
    show_default=True,
    help="Whether the person is alive.",
)
@click.pass_context
def register(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    name: str,
    person_id: int,
    age: int,
    gender: str,
    alive: bool,
) -> None:
    """Register NAME as a voter and print the outcome."""
    person = Person(
        name=name, id=person_id, age=age, gender=Gender[gender.upper()], alive=alive
    )
    app = bootstrap(repository=open_repository(ctx, resolve_db_url()))
    try:
        result = app.registry.register_voter(person)
    except RegistryRepositoryError as e:
        raise _storage_failure(e) from e

    click.echo(result.name)
    if not result.is_accepted:
        ctx.exit(REJECTED_EXIT_CODE)


@click.command()
@click.argument("person_id", metavar="ID", type=int)
@click.pass_context
def lookup(ctx: click.Context, person_id: int) -> None:
    """Show the registered voter with identifier ID."""
    app = bootstrap(repository=open_repository(ctx, resolve_db_url()))
    try:
        person = app.repository.get(person_id)
    except RegistryRepositoryError as e:
        raise _storage_failure(e) from e

    if person is None:
        error(f"No voter registered with ID {person_id}.")
        ctx.exit(REJECTED_EXIT_CODE)

    click.echo(f"ID     : {person.id}")
    click.echo(f"Name   : {person.name}")
    click.echo(f"Age    : {person.age}")
    click.echo(f"Gender : {person.gender.name}")
    click.echo(f"Alive  : {'yes' if person.alive else 'no'}")
