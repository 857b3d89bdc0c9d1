from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.config import get_settings
from user_api.db.user_store import UserStore
from user_api.main import create_app


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_PREFIX", "")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("REQUEST_ID_HEADER", "X-Request-ID")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
async def api_client(store: UserStore) -> AsyncIterator[AsyncClient]:
    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
