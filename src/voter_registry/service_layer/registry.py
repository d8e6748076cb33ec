"""Voter registration use case.

Rules are evaluated in a fixed order and the first failing rule decides the
outcome:

| Order | Rule                       | Outcome      | Storage calls   |
|-------|----------------------------|--------------|-----------------|
| 1     | ``id < 0``                 | INVALID      | none            |
| 2     | ``age < LEGAL_VOTING_AGE`` | UNDERAGE     | none            |
| 3     | ``not alive``              | DEAD         | none            |
| 4     | id already stored          | DUPLICATED   | read            |
| 5     | otherwise                  | VALID        | read + insert   |

Infrastructure failures raised by the repository propagate unchanged. The
single exception is `DuplicatePersonIdError` raised by `insert`: it means a
concurrent registration stored the same id between the existence check and
the insert, so it is reported as `DUPLICATED`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from voter_registry.domain import LEGAL_VOTING_AGE, RegisterResult
from voter_registry.interfaces.registry_repository import DuplicatePersonIdError

if TYPE_CHECKING:
    from voter_registry.domain import Person
    from voter_registry.interfaces.registry_repository import RegistryRepository

logger = logging.getLogger(__name__)


def check_eligibility(person: Person) -> RegisterResult | None:
    """Apply the storage-free rules to a person.

    Args:
        person: The candidate voter.

    Returns:
        RegisterResult | None: The rejection for the first failing rule, or
        None if the person is eligible.
    """
    if person.id < 0:
        return RegisterResult.INVALID
    if person.age < LEGAL_VOTING_AGE:
        return RegisterResult.UNDERAGE
    if not person.alive:
        return RegisterResult.DEAD
    return None


class Registry:
    """Registers voters against a storage port.

    Args:
        repository: The RegistryRepository used for the duplication check and
            for persisting accepted voters.
    """

    def __init__(self, repository: RegistryRepository) -> None:
        self.repository = repository

    def register_voter(self, person: Person) -> RegisterResult:
        """Decide whether to register a person, and store them if accepted.

        Args:
            person: The candidate voter.

        Returns:
            RegisterResult: Exactly one outcome for the attempt.

        Raises:
            RegistryRepositoryError: Any storage failure other than a lost
                insert race, unchanged.
        """
        if (rejection := check_eligibility(person)) is not None:
            logger.debug("Rejected person %s: %s", person.id, rejection.name)
            return rejection

        if self.repository.exists_by_id(person.id):
            logger.debug("Rejected person %s: already registered", person.id)
            return RegisterResult.DUPLICATED

        try:
            self.repository.insert(person)
        except DuplicatePersonIdError:
            logger.warning(
                "Person %s was registered concurrently; reporting as duplicated",
                person.id,
            )
            return RegisterResult.DUPLICATED

        logger.info("Registered person %s", person.id)
        return RegisterResult.VALID
