"""In-memory implementation of the RegistryRepository interface."""

from __future__ import annotations

import threading

from voter_registry.domain import Person
from voter_registry.interfaces.registry_repository import (
    DuplicatePersonIdError,
    PersonIdOutOfRangeError,
    RegistryRepository,
    is_storable_id,
)


class InMemoryRegistryRepository(RegistryRepository):
    """In-memory implementation of the RegistryRepository interface.

    This implementation is intended for testing and development purposes only.
    It does not persist data across processes. Inserts are guarded by a lock so
    the uniqueness check and the write happen atomically.

    Args:
        fail_with: Optional exception raised by every operation, used to
            simulate an unreachable store.
    """

    def __init__(self, fail_with: Exception | None = None) -> None:
        self._records: dict[int, Person] = {}  # person.id: person
        self._lock = threading.Lock()
        self.fail_with = fail_with

    def _check_available(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def init_schema(self) -> None:
        self._check_available()

    def exists_by_id(self, person_id: int) -> bool:
        self._check_available()
        return person_id in self._records

    def insert(self, person: Person) -> None:
        self._check_available()
        if not is_storable_id(person.id):
            raise PersonIdOutOfRangeError(person.id)
        with self._lock:
            if person.id in self._records:
                raise DuplicatePersonIdError(person.id)
            self._records[person.id] = person

    def get(self, person_id: int) -> Person | None:
        self._check_available()
        return self._records.get(person_id)

    def count(self) -> int:
        self._check_available()
        return len(self._records)

    def delete_all(self) -> None:
        self._check_available()
        with self._lock:
            self._records.clear()
