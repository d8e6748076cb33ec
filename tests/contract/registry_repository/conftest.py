"""Pytest fixtures for RegistryRepository contract tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from voter_registry.adapters.registry_repository import (
    InMemoryRegistryRepository,
    SqlAlchemyRegistryRepository,
)

if TYPE_CHECKING:
    from voter_registry.interfaces.registry_repository import RegistryRepository


@pytest.fixture(params=["memory", "sqlite_memory", "sqlite_file"])
def repository(request: pytest.FixtureRequest) -> Iterator[RegistryRepository]:
    """Return a fresh, initialized and empty repository for the requested backend.

    Supported params:
      - `"memory"` → InMemoryRegistryRepository
      - `"sqlite_memory"` → SqlAlchemyRegistryRepository on in-memory SQLite,
        schema created by `init_schema()`
      - `"sqlite_file"` → SqlAlchemyRegistryRepository on a file SQLite DB
        migrated by Alembic

    Mirrors the usual setup: initialize the schema, then clear old data.
    """
    match request.param:
        case "memory":
            repo: RegistryRepository = InMemoryRegistryRepository()
        case "sqlite_memory":
            repo = SqlAlchemyRegistryRepository(
                request.getfixturevalue("sqlite_engine_memory")
            )
        case "sqlite_file":
            repo = SqlAlchemyRegistryRepository(
                request.getfixturevalue("sqlite_engine_file")
            )
        case _:
            raise ValueError(f"unknown repository type: {request.param}")

    repo.init_schema()
    repo.delete_all()
    yield repo
