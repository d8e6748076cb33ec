"""Bootstrap the registration use case with its storage adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from voter_registry import config
from voter_registry.adapters.db.engine import make_engine
from voter_registry.adapters.registry_repository import SqlAlchemyRegistryRepository
from voter_registry.interfaces.registry_repository import RegistryRepository
from voter_registry.service_layer import Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    repository: RegistryRepository
    registry: Registry


def build_repository(url: str) -> SqlAlchemyRegistryRepository:
    """Build a SQLAlchemy-backed repository for the given database URL."""
    return SqlAlchemyRegistryRepository(make_engine(url))


def bootstrap(
    url: str | None = None, repository: RegistryRepository | None = None
) -> AppContainer:
    """Wire the registration use case.

    Args:
        url: Database URL. Defaults to `VOTER_REGISTRY_DB_URL`; ignored when a
            repository is given.
        repository: Pre-built repository to use instead of a SQLAlchemy one
            (e.g., an in-memory repository in tests).

    Raises:
        DatabaseUrlNotSetError: If neither a url, a repository, nor
            `VOTER_REGISTRY_DB_URL` is available.
    """
    if repository is None:
        repository = build_repository(url or config.get_db_url())
    logger.debug("Bootstrapped registry with %s", type(repository).__name__)

    return AppContainer(repository=repository, registry=Registry(repository))
