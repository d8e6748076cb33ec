"""Registry repository interface and related errors."""

from .errors import (
    DuplicatePersonIdError,
    PersonIdOutOfRangeError,
    RegistryRepositoryError,
    SchemaError,
    StoreUnavailableError,
)
from .registry_repository import (
    PERSON_ID_MAX,
    PERSON_ID_MIN,
    RegistryRepository,
    is_storable_id,
)

__all__ = [
    "RegistryRepository",
    "RegistryRepositoryError",
    "DuplicatePersonIdError",
    "PersonIdOutOfRangeError",
    "PERSON_ID_MIN",
    "PERSON_ID_MAX",
    "is_storable_id",
    "StoreUnavailableError",
    "SchemaError",
]
