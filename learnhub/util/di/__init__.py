"""Dependency injection module.

Every layer has one provider: config, domain services, use cases and
persistence. Only persistence is swappable; tests run on the in-memory
implementation unless they unmock it.
"""

from learnhub.util.di.base import Component, ProviderBase, get_provider, is_swappable
from learnhub.util.di.container import PROVIDERS, create_container, setup_di
from learnhub.util.di.core import ProdConfigProvider
from learnhub.util.di.domain import ProdDomainProvider
from learnhub.util.di.application import ProdApplicationProvider
from learnhub.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "create_container",
    "get_provider",
    "is_swappable",
    "setup_di",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
