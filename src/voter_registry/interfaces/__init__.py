"""Interfaces (application boundary) for VOTER REGISTRY.

Defines framework-free application contracts: the storage port the
registration use case depends on, and the errors its implementations raise.
Business rules stay out of this package.

Dependency rule: may import `voter_registry.domain` value objects only. It may
be imported by `voter_registry.service_layer`, `voter_registry.adapters`, and
`voter_registry.bootstrap`.
"""
