"""Bootstrap (composition root) for casework.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers (commands and queries), composes shared services (message bus, unit
of work, ID generator, example-data source) and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `casework.adapters`, `casework.service_layer`,
  `casework.interfaces`, `casework.domain`, and `casework.config`.
- Inner layers must not import `casework.bootstrap`.

No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_message_bus,
    build_write_uow,
    inject_dependencies,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_message_bus",
    "build_write_uow",
    "inject_dependencies",
]
