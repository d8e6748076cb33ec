"""Test the bootstrap function."""

import pytest

from voter_registry.adapters.registry_repository import (
    InMemoryRegistryRepository,
    SqlAlchemyRegistryRepository,
)
from voter_registry.bootstrap import AppContainer, bootstrap, build_repository
from voter_registry.config import DatabaseUrlNotSetError
from voter_registry.domain import RegisterResult

# pylint: disable=redefined-outer-name


class TestBuildRepository:
    """Tests for the build_repository function."""

    @staticmethod
    def test_returns_sqlalchemy_repository():
        """The repository is bound to an engine for the given URL."""
        repo = build_repository("sqlite:///:memory:")
        assert isinstance(repo, SqlAlchemyRegistryRepository)
        assert str(repo.engine.url) == "sqlite:///:memory:"


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_reads_url_from_environment(monkeypatch):
        """Without arguments the URL comes from VOTER_REGISTRY_DB_URL."""
        monkeypatch.setenv("VOTER_REGISTRY_DB_URL", "sqlite:///:memory:")

        app = bootstrap()

        assert isinstance(app, AppContainer)
        assert isinstance(app.repository, SqlAlchemyRegistryRepository)
        assert app.registry.repository is app.repository

    @staticmethod
    def test_missing_url_raises(monkeypatch):
        """No URL anywhere is a configuration error."""
        monkeypatch.delenv("VOTER_REGISTRY_DB_URL", raising=False)

        with pytest.raises(DatabaseUrlNotSetError):
            bootstrap()

    @staticmethod
    def test_accepts_prebuilt_repository(monkeypatch, make_person):
        """A given repository is used as is and no URL is needed."""
        monkeypatch.delenv("VOTER_REGISTRY_DB_URL", raising=False)
        repo = InMemoryRegistryRepository()

        app = bootstrap(repository=repo)

        assert app.repository is repo
        assert app.registry.register_voter(make_person()) is RegisterResult.VALID

    @staticmethod
    def test_wired_registry_persists(sqlite_url_file, make_person):
        """End to end through the composition root on a real database."""
        app = bootstrap(sqlite_url_file)
        app.repository.init_schema()

        assert app.registry.register_voter(make_person(id=9)) is RegisterResult.VALID
        assert app.repository.exists_by_id(9)
