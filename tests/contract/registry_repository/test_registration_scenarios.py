"""Registration scenarios run end to end against every repository backend.

Each test follows Arrange / Act / Assert: the `repository` fixture provides an
initialized, empty store and the use case is built on top of it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from voter_registry.domain import Gender, Person, RegisterResult
from voter_registry.interfaces.registry_repository import (
    PersonIdOutOfRangeError,
    RegistryRepositoryError,
)
from voter_registry.service_layer import Registry

if TYPE_CHECKING:
    from voter_registry.interfaces.registry_repository import RegistryRepository

# pylint: disable=redefined-outer-name


@pytest.fixture
def registry(repository: RegistryRepository) -> Registry:
    """Registration use case wired to the backend under test."""
    return Registry(repository)


def test_registers_valid_person(registry: Registry, repository: RegistryRepository):
    """An adult, alive person with a fresh id is stored."""
    ana = Person("Ana", 100, 30, Gender.FEMALE, True)

    result = registry.register_voter(ana)

    assert result is RegisterResult.VALID
    assert repository.exists_by_id(100)


def test_persists_first_and_rejects_duplicate(
    registry: Registry, repository: RegistryRepository
):
    """Same id twice: the second attempt is DUPLICATED and changes nothing."""
    ana = Person("Ana", 100, 30, Gender.FEMALE, True)
    ana_dos = Person("AnaDos", 100, 40, Gender.FEMALE, True)

    first = registry.register_voter(ana)
    second = registry.register_voter(ana_dos)

    assert first is RegisterResult.VALID
    assert second is RegisterResult.DUPLICATED
    assert repository.get(100) == ana


@pytest.mark.parametrize(
    ("person", "expected"),
    [
        (Person("Luis", 102, 16, Gender.MALE, True), RegisterResult.UNDERAGE),
        (Person("Maria", 103, 45, Gender.FEMALE, False), RegisterResult.DEAD),
        (Person("Pedro", -1, 30, Gender.MALE, True), RegisterResult.INVALID),
    ],
    ids=["underage", "deceased", "negative-id"],
)
def test_rejects_ineligible_person(
    registry: Registry,
    repository: RegistryRepository,
    person: Person,
    expected: RegisterResult,
):
    """Ineligible persons are rejected and never stored."""
    result = registry.register_voter(person)

    assert result is expected
    assert not repository.exists_by_id(person.id)


def test_repeated_underage_registration_stays_rejected(
    registry: Registry,
    repository: RegistryRepository,
    make_person: Callable[..., Person],
):
    """Retrying an ineligible person never creates a record."""
    minor = make_person(id=102, age=16)

    results = [registry.register_voter(minor) for _ in range(3)]

    assert results == [RegisterResult.UNDERAGE] * 3
    assert repository.count() == 0


def test_unstorable_id_is_a_storage_error(
    registry: Registry,
    repository: RegistryRepository,
    make_person: Callable[..., Person],
):
    """An eligible person whose id does not fit storage raises a repository error."""
    with pytest.raises(RegistryRepositoryError) as exc_info:
        registry.register_voter(make_person(id=2**63))

    assert isinstance(exc_info.value, PersonIdOutOfRangeError)
    assert repository.count() == 0


def test_huge_negative_id_is_invalid(
    registry: Registry, make_person: Callable[..., Person]
):
    """The id rule runs before storage, whatever the magnitude."""
    assert registry.register_voter(make_person(id=-(2**70))) is RegisterResult.INVALID
