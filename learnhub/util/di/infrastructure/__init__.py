"""Infrastructure providers.

Every implementation of a mockable component must be imported here so
``get_provider`` can find it through ``__subclasses__()``.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
