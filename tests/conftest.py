from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from expense_manager.config import get_settings
from expense_manager.main import app
from expense_manager.store import InMemoryStore, get_store, reset_store

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture(autouse=True)
def _no_latency(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without the artificial network delay."""
    monkeypatch.setattr(get_settings(), "simulate_latency", False)


@pytest.fixture(autouse=True)
def store() -> InMemoryStore:
    """Install a freshly seeded store for each test and return it."""
    reset_store()
    return get_store()


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def fast_latency(monkeypatch: pytest.MonkeyPatch) -> float:
    """Turn the artificial delay on at a fraction of its real length and return the scale."""
    scale = 0.2
    monkeypatch.setattr(get_settings(), "simulate_latency", True)
    monkeypatch.setattr(get_settings(), "latency_scale", scale)
    return scale
