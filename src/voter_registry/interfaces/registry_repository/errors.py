"""Errors raised by a RegistryRepository."""


class RegistryRepositoryError(Exception):
    """Base class for RegistryRepository errors."""


class DuplicatePersonIdError(RegistryRepositoryError):
    """Raised when the repository is asked to insert a person whose id
    is already stored.

    Attributes:
        person_id (int): The identifier that is already stored.
    """

    def __init__(self, person_id: int):
        super().__init__(f"Person ID '{person_id}' is already registered.")
        self.person_id = person_id


class StoreUnavailableError(RegistryRepositoryError):
    """Raised when the backing store cannot be reached or fails operationally
    (e.g., connection refused, database file cannot be opened)."""


class SchemaError(RegistryRepositoryError):
    """Raised when the backing store lacks the structure needed to hold
    person records, or that structure could not be created."""


class PersonIdOutOfRangeError(RegistryRepositoryError):
    """Raised when asked to insert a person whose id cannot be stored
    (outside the signed 64-bit range).

    Attributes:
        person_id (int): The rejected identifier.
    """

    def __init__(self, person_id: int):
        super().__init__(f"Person ID '{person_id}' is outside the storable range.")
        self.person_id = person_id
