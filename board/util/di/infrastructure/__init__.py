"""Infrastructure providers: the Postgres persistence layer.

``ProdPersistenceProvider`` must be imported here so that
``PersistenceProvider.__subclasses__()`` finds it when the container is built.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
