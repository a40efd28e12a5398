"""Root conftest — fresh app and HTTP client per test.

Invariants:
    - Every test gets a new app, so the request counter starts at 0
    - Requests go through ASGITransport (no sockets, no lifespan)
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test runs quiet and independent of a developer .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")

from server_demo.main import create_app  # noqa: E402


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
