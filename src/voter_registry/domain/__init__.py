"""Domain layer for VOTER REGISTRY.

Contains business values: the `Person` candidate record, the `Gender`
enumeration and the closed `RegisterResult` outcome set. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `voter_registry.adapters` or
`voter_registry.entrypoints`.
"""

from .model import LEGAL_VOTING_AGE, Gender, Person, RegisterResult

__all__ = ["LEGAL_VOTING_AGE", "Gender", "Person", "RegisterResult"]
