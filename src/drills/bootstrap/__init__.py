"""Bootstrap (composition root) for DRILLS.

Assembles the application at runtime: builds the default adapters, reads
configuration, and binds the adapters to the storefront and schedule
operations.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- This package may import: `drills.adapters`, `drills.service_layer`,
  `drills.interfaces`, `drills.domain`, and `drills.config`.
- Inner layers must not import `drills.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
