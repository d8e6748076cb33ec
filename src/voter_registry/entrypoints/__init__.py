"""Entrypoints (inbound adapters) for VOTER REGISTRY.

Expose the application to the outside world through the CLI. Parse and
validate inputs, call the registration use case, and present results.

Dependency rule: may import `voter_registry.bootstrap` and
`voter_registry.service_layer`; avoid importing `voter_registry.adapters`
directly.
"""
