"""Providers for swappable infrastructure components.

Production implementations are imported here so that they are registered
as subclasses before ``get_provider`` looks for them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
