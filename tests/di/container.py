"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from learnhub.util.di import PROVIDERS, Component, get_provider, is_swappable


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components default to their mocks.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and API tests - in-memory persistence
        container = build_test_container()

        # Integration tests - PostgreSQL from DATABASE__URL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    swappable = {base.__mock_component__ for base in PROVIDERS if is_swappable(base)}
    unknown = unmock - swappable
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_swappable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
