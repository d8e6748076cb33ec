"""Fixtures for end-to-end CLI tests.

Provides a Click CliRunner, a migrated file-backed database exported through
VOTER_REGISTRY_DB_URL, and an `invoke` helper that runs the top-level
command with the flight recorder disabled so tests never write to the user's
log directory.
"""

from collections.abc import Callable, Iterator

import pytest
from click.testing import CliRunner, Result

from voter_registry.adapters.db.engine import make_engine
from voter_registry.adapters.registry_repository import SqlAlchemyRegistryRepository
from voter_registry.entrypoints.cli.main import registry_cli

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def db_url(monkeypatch: pytest.MonkeyPatch, sqlite_url_file: str) -> str:
    """Export a fresh file-backed SQLite URL (no schema yet)."""
    monkeypatch.setenv("VOTER_REGISTRY_DB_URL", sqlite_url_file)
    return sqlite_url_file


@pytest.fixture
def repository(db_url: str) -> Iterator[SqlAlchemyRegistryRepository]:
    """Initialized repository on the exported database, for arranging/asserting."""
    engine = make_engine(db_url)
    repo = SqlAlchemyRegistryRepository(engine)
    repo.init_schema()
    yield repo
    engine.dispose()


@pytest.fixture
def invoke(runner: CliRunner) -> Callable[..., Result]:
    """Run `voter-registry --no-flight-recorder <args>`."""

    def _invoke(*args: str, input: str | None = None) -> Result:  # pylint: disable=redefined-builtin
        return runner.invoke(
            registry_cli, ["--no-flight-recorder", *args], input=input
        )

    return _invoke
