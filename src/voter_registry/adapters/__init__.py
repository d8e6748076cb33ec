"""Adapters (infrastructure) for VOTER REGISTRY.

Provide concrete implementations of the storage port (SQLAlchemy and
in-memory), plus persistence mapping and related wiring (engines, metadata,
migrations).

Dependency rule: may import `voter_registry.domain` and
`voter_registry.interfaces`; the domain must not import this package.
"""
