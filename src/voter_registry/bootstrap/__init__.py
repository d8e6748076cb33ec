"""Bootstrap (composition root) for VOTER REGISTRY.

Assembles the application at runtime: reads configuration, builds the
database engine, wires the concrete storage adapter into the registration use
case, and exposes both on a small container for entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain
  wiring details).
- This package may import: `voter_registry.adapters`,
  `voter_registry.service_layer`, `voter_registry.interfaces`,
  `voter_registry.domain`, and `voter_registry.config`.
- Inner layers must not import `voter_registry.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_repository

__all__ = ["AppContainer", "bootstrap", "build_repository"]
