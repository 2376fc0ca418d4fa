"""Fixtures for end-to-end API tests.

The app runs against a test container with in-memory persistence. The
store is resolved once up front so tests can seed it synchronously.
"""

import asyncio
from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from board.config import Settings
from board.domain.model import User
from board.interface.api.app import create_app
from board.persistence.repository.inmemory import InMemoryStore
from board.util.jwt import encode_token
from tests.di import build_test_container


@dataclass
class ApiEnv:
    """Test client together with the store behind it."""

    client: TestClient
    store: InMemoryStore
    settings: Settings

    def login(self, user: User) -> None:
        """Send subsequent requests as ``user``."""
        token = encode_token(user.id, user.username, self.settings.auth)
        self.client.cookies.set("auth_token", token)

    def logout(self) -> None:
        self.client.cookies.clear()


@pytest.fixture
def api():
    """Create test client with test container."""
    container = build_test_container()
    store = asyncio.run(container.get(InMemoryStore))
    settings = asyncio.run(container.get(Settings))

    with TestClient(create_app(container)) as client:
        yield ApiEnv(client=client, store=store, settings=settings)
