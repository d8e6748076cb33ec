"""Interface for persisting and querying person records by identifier."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from voter_registry.domain import Person

#: Identifiers are stored as signed 64-bit integers.
PERSON_ID_MIN = -(2**63)
PERSON_ID_MAX = 2**63 - 1


def is_storable_id(person_id: int) -> bool:
    """Return whether `person_id` fits the storage id column."""
    return PERSON_ID_MIN <= person_id <= PERSON_ID_MAX


class RegistryRepository(abc.ABC):
    """Storage port for registered voters.

    Records are keyed by `Person.id`. Implementations must enforce uniqueness
    of the id atomically: `insert` never overwrites an existing record.
    """

    @abc.abstractmethod
    def init_schema(self) -> None:
        """Ensure the backing store can hold person records.

        Idempotent: calling it on an already initialized store is a no-op.

        Raises:
            SchemaError: If the structure could not be created.
            StoreUnavailableError: If the store cannot be reached.
        """

    @abc.abstractmethod
    def exists_by_id(self, person_id: int) -> bool:
        """Return whether a record with the given identifier is stored.

        Args:
            person_id (int): The identifier to look up. Negative values are
                valid arguments and simply return False, as do ids
                outside the storable range.

        Returns:
            bool: True if a record exists, otherwise False.

        Raises:
            StoreUnavailableError: If the store cannot be reached.
        """

    @abc.abstractmethod
    def insert(self, person: Person) -> None:
        """Persist the full record keyed by `person.id`.

        Args:
            person (Person): The person to store.

        Raises:
            DuplicatePersonIdError: If a record with the same id already exists.
            PersonIdOutOfRangeError: If `person.id` is not a storable id.
            StoreUnavailableError: If the store cannot be reached.
        """

    @abc.abstractmethod
    def get(self, person_id: int) -> Person | None:
        """Retrieve the stored record for an identifier.

        Args:
            person_id (int): The identifier to look up.

        Returns:
            Person | None: The stored person if found, otherwise None (always
            None for ids outside the storable range).

        Raises:
            StoreUnavailableError: If the store cannot be reached.
        """

    @abc.abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""

    @abc.abstractmethod
    def delete_all(self) -> None:
        """Remove every stored record. Intended for tests and resets."""
