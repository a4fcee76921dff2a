"""Infrastructure providers.

Production subclasses must be imported here so get_provider can find
them through ``__subclasses__()``; test subclasses live in tests/di.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
