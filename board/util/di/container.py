"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def build_container(*providers: Provider) -> AsyncContainer:
    """Assemble an async container with FastAPI request context support."""
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation.
    Settings are loaded from environment variables when first requested.
    """
    return build_container(
        *(get_provider(base, use_mock=False)() for base in PROVIDERS)
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute can resolve FromDishka."""
    setup_dishka(container, app)
