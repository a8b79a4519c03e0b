"""
Pytest fixtures for the demo app. Builds the application from explicit settings
and swaps the database probe for an in-process fake where a real database is
not needed.
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from demo_app.api.dependencies import get_probe
from demo_app.config import Settings
from demo_app.main import create_app


class FakeProbe:
    """Stands in for DatabaseProbe; fails with ``error`` when set."""

    def __init__(self, error: Exception | None = None, delay: float = 0.0) -> None:
        self.error = error
        self.delay = delay
        self.calls = 0

    async def check(self) -> None:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
def fake_probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def app(settings, fake_probe):
    application = create_app(settings)
    application.dependency_overrides[get_probe] = lambda: fake_probe
    return application


@pytest.fixture
def client(app):
    """TestClient running the app lifespan, with the fake probe injected."""
    with TestClient(app) as test_client:
        yield test_client
