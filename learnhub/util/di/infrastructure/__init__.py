"""Infrastructure providers.

Implementations are imported here so ``PersistenceProvider.__subclasses__()``
sees them before a container is built.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
