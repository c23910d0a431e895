"""Bootstrap (composition root) for the bookstore.

Assembles the application at runtime: builds the service-layer components,
hands each its backing collection, and pre-populates them from a seed file
when one is configured.

Import rules:
- Entry points import *this* package (not adapters/service_layer/domain).
- This package may import: `bookstore.adapters`, `bookstore.service_layer`,
  `bookstore.domain`, and `bookstore.config`.
- Inner layers must not import `bookstore.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from bookstore.adapters.seed import SeedError

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "SeedError", "bootstrap"]
