"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from discuss.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Mockable components (those with a mock subclass) get their mock
    unless listed in unmock; concrete providers are always used as-is.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit and E2E tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()

    mockable = {
        base.__mock_component__: base
        for base in PROVIDERS
        if base.is_mockable()
    }
    unknown = unmock - set(mockable)
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.__mock_component__ in mockable and (
            base.__mock_component__ not in unmock
        )
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*provider_instances, FastapiProvider())
