"""Dependency injection container."""

from typing import Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from learnhub.util.di.application import ProdApplicationProvider
from learnhub.util.di.base import ProviderBase, get_provider
from learnhub.util.di.core import ProdConfigProvider
from learnhub.util.di.domain import ProdDomainProvider
from learnhub.util.di.infrastructure import PersistenceProvider

# Resolution order does not matter to dishka; grouped by layer for reading
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings come from the environment; persistence is PostgreSQL.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``."""
    setup_dishka(container, app)
