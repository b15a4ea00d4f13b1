"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from learnhub.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every component's production implementation.

    Settings are read from the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve ``app``'s DishkaRoute handlers from ``container``."""
    setup_dishka(container, app)
