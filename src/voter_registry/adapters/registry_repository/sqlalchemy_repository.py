"""SQLAlchemy-backed RegistryRepository adapter.

Persists registered voters in the ``person`` table (see
``adapters.registry_repository.schema``). Each operation runs in its own
transaction, committed on success, so an inserted record is visible to every
subsequent call on the same engine.

Driver errors are mapped to repository errors:

| SQLAlchemy error                     | Raised as                  |
|--------------------------------------|----------------------------|
| IntegrityError (unique/primary key)  | DuplicatePersonIdError     |
| missing table                        | SchemaError                |
| id outside BIGINT (pre-checked)      | PersonIdOutOfRangeError    |
| any other DBAPIError                 | StoreUnavailableError      |
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)

from voter_registry.adapters.db.metadata import metadata
from voter_registry.domain import Gender, Person
from voter_registry.interfaces.registry_repository import (
    DuplicatePersonIdError,
    PersonIdOutOfRangeError,
    RegistryRepository,
    RegistryRepositoryError,
    SchemaError,
    StoreUnavailableError,
    is_storable_id,
)

from .schema import person as person_table

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine, Row

# matched case-insensitively against the driver message
UNIQUE_VIOLATION_KEYWORDS = ("unique", "duplicate key")  # pragma: no mutate
MISSING_TABLE_KEYWORDS = ("no such table", "does not exist")  # pragma: no mutate


class SqlAlchemyRegistryRepository(RegistryRepository):
    """RegistryRepository implementation that supports both Postgres and SQLite."""

    def __init__(self, engine: Engine):
        self.engine = engine

    # --- schema ---

    def init_schema(self) -> None:
        try:
            with self.engine.begin() as conn:
                metadata.create_all(conn, tables=[person_table], checkfirst=True)
        except DBAPIError as e:
            self._raise_repository_error(e, schema_error=True)

    # --- lookups ---

    def exists_by_id(self, person_id: int) -> bool:
        if not is_storable_id(person_id):
            return False
        stmt = select(person_table.c.id).where(person_table.c.id == person_id)
        try:
            with self.engine.begin() as conn:
                return conn.execute(stmt).first() is not None
        except DBAPIError as e:
            self._raise_repository_error(e)

    def get(self, person_id: int) -> Person | None:
        if not is_storable_id(person_id):
            return None
        stmt = select(person_table).where(person_table.c.id == person_id)
        try:
            with self.engine.begin() as conn:
                row = conn.execute(stmt).first()
        except DBAPIError as e:
            self._raise_repository_error(e)
        return None if row is None else self._row_to_person(row)

    def count(self) -> int:
        stmt = select(func.count()).select_from(person_table)
        try:
            with self.engine.begin() as conn:
                return int(conn.execute(stmt).scalar_one())
        except DBAPIError as e:
            self._raise_repository_error(e)

    # --- writes ---

    def insert(self, person: Person) -> None:
        if not is_storable_id(person.id):
            raise PersonIdOutOfRangeError(person.id)
        stmt = insert(person_table).values(
            id=person.id,
            name=person.name,
            age=person.age,
            gender=person.gender.name,
            alive=person.alive,
        )
        try:
            with self.engine.begin() as conn:
                conn.execute(stmt)
        except IntegrityError as e:
            if self._matches(e, UNIQUE_VIOLATION_KEYWORDS):
                raise DuplicatePersonIdError(person.id) from e
            raise RegistryRepositoryError(str(e.orig or e)) from e
        except DBAPIError as e:
            self._raise_repository_error(e)

    def delete_all(self) -> None:
        try:
            with self.engine.begin() as conn:
                conn.execute(delete(person_table))
        except DBAPIError as e:
            self._raise_repository_error(e)

    # --- internals ---

    @staticmethod
    def _row_to_person(row: Row) -> Person:
        return Person(
            name=row.name,
            id=int(row.id),
            age=int(row.age),
            gender=Gender[row.gender],
            alive=bool(row.alive),
        )

    @staticmethod
    def _matches(error: DBAPIError, keywords: tuple[str, ...]) -> bool:
        msg = str(error.orig) if error.orig is not None else str(error)
        return any(kw in msg.lower() for kw in keywords)

    @classmethod
    def _raise_repository_error(
        cls, error: DBAPIError, *, schema_error: bool = False
    ) -> NoReturn:
        """Raise the repository error matching a SQLAlchemy DBAPIError.

        Args:
            error: The error raised by SQLAlchemy.
            schema_error: Whether the failing operation was schema creation, in
                which case non-connectivity failures are reported as SchemaError.

        Raises:
            SchemaError: If the table is missing, or schema creation failed for
                a reason other than connectivity.
            StoreUnavailableError: For connectivity and other operational failures.
        """
        msg = str(error.orig) if error.orig is not None else str(error)
        if cls._matches(error, MISSING_TABLE_KEYWORDS):
            raise SchemaError(msg) from error
        if schema_error and not isinstance(
            error, (OperationalError, InterfaceError)
        ):
            raise SchemaError(msg) from error
        raise StoreUnavailableError(msg) from error
