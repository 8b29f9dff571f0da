"""Dependency injection wiring.

Providers come in two kinds:

- plain providers (config, domain services, use cases) are used as they are,
- component providers (currently only persistence) are abstract bases with a
  production and a mock subclass; tests pick one per component.
"""

from typing import Type

from social.util.di.application import ProdApplicationProvider
from social.util.di.base import Component, ProviderBase
from social.util.di.core import ProdConfigProvider
from social.util.di.domain import ProdDomainProvider
from social.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock subclass of a component

    Returns:
        ``base`` itself for plain providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(
        f"No {'mock' if use_mock else 'production'} implementation for {component}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
