"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum

#: Minimum age (in years) at which a person may register to vote.
LEGAL_VOTING_AGE = 18


class Gender(Enum):
    """Enumeration of recorded genders.

    Carried through registration and storage; not used by eligibility rules.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class RegisterResult(Enum):
    """Closed set of outcomes of a single registration attempt.

    Only `VALID` means the person was stored. Every other member is a domain
    rejection: an expected outcome returned as a value, never raised.
    """

    VALID = "valid"
    INVALID = "invalid"  # identifier is negative
    UNDERAGE = "underage"
    DEAD = "dead"
    DUPLICATED = "duplicated"

    @property
    def is_accepted(self) -> bool:
        """True only for `VALID`."""
        return self is RegisterResult.VALID


@dataclass(frozen=True)
class Person:
    """Value object representing a candidate voter.

    No validation happens at construction time; a negative id or an absurd
    age is still a well-formed `Person`. Eligibility is decided by the
    registration use case.
    """

    name: str
    id: int  # pylint: disable=invalid-name
    age: int
    gender: Gender
    alive: bool
