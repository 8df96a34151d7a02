"""Provider bases and mock selection for dependency injection."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with a swappable implementation; tests replace them by default
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all LearnHub providers.

    A provider that declares ``__mock_component__`` is abstract: its
    subclasses are the real implementation and a mock (``__is_mock__``).
    Providers without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_swappable(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` has implementations to choose between."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Raises:
        ValueError: If ``base`` has no implementation of the requested kind
    """
    if not is_swappable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")
