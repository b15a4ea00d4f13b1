"""Dependency injection: provider registry and implementation lookup."""

from typing import Type

from learnhub.util.di.application import ProdApplicationProvider
from learnhub.util.di.base import Component, ProviderBase
from learnhub.util.di.core import ProdConfigProvider
from learnhub.util.di.domain import ProdDomainProvider
from learnhub.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from learnhub.util.error import DependencyInjectionError

# Concrete providers are used as they are; component bases get an
# implementation picked by get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a registry entry to the provider class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself when nothing subclasses it, otherwise the subclass
        whose ``__is_mock__`` equals ``use_mock``

    Raises:
        DependencyInjectionError: If no subclass matches
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    raise DependencyInjectionError(
        base.__mock_component__ or base.__name__, mock=use_mock
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
