"""Service layer for VOTER REGISTRY.

Implements the application use case: voter registration. Applies the domain
eligibility rules and calls the outbound storage port defined in
`voter_registry.interfaces`.

Dependency rule: may import `voter_registry.domain` and
`voter_registry.interfaces`, but not `voter_registry.adapters` or
`voter_registry.entrypoints`.
"""

from .registry import Registry, check_eligibility

__all__ = ["Registry", "check_eligibility"]
