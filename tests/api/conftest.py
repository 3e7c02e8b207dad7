"""API test fixtures — FastAPI test client over ASGI.

Invariants:
    - Every test gets its own AsyncClient bound to the real app
    - No network: httpx ASGITransport calls the app in-process

Design Decisions:
    - The app holds no state between requests, so no dependency overrides are needed
"""

import pytest
from httpx import ASGITransport, AsyncClient

from listzipper.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
