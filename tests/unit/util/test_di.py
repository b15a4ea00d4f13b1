"""Unit tests for provider selection."""

import pytest

from learnhub.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProviderBase,
    get_provider,
)
from learnhub.util.di.infrastructure import ProdPersistenceProvider
from learnhub.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class SearchProvider(ProviderBase):
    __mock_component__ = "search"


class ProdSearchProvider(SearchProvider):
    pass


def test_concrete_provider_is_used_as_is():
    assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider


def test_component_implementations():
    assert get_provider(PersistenceProvider) is ProdPersistenceProvider
    assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


def test_missing_mock_implementation():
    assert get_provider(SearchProvider) is ProdSearchProvider

    with pytest.raises(DependencyInjectionError, match="No mock implementation for search"):
        get_provider(SearchProvider, use_mock=True)


def test_unknown_component_cannot_be_unmocked():
    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"search"})
