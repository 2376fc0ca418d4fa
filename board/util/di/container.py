"""Production DI container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by the running API.

    Every swappable component gets its production implementation. Settings
    are read from the environment when first requested.
    """
    providers = [get_provider(entry)() for entry in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let routes declared with ``DishkaRoute`` resolve from ``container``."""
    setup_dishka(container, app)
