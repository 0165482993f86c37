"""Dependency injection module.

Providers are grouped per layer. Persistence is the only mockable
component: its base class has a production subclass (PostgreSQL) and, in
the test suite, a mock subclass (in-memory repositories).
"""

from typing import Type

from punchline.util.di.application import ProdApplicationProvider
from punchline.util.di.base import Component, ProviderBase
from punchline.util.di.core import ProdConfigProvider
from punchline.util.di.domain import ProdDomainProvider
from punchline.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order matters only for overrides: later providers win
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    A base without subclasses is concrete and returned as-is. Otherwise the
    subclass whose ``__is_mock__`` flag matches ``use_mock`` is returned.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If no implementation of the requested kind is loaded
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component_name = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component_name}")


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
