"""API test fixtures: FastAPI app over the per-test store + httpx client.

Design Decisions:
    - ASGITransport runs the app in-process; lifespan is not triggered, so logging
      setup is left to pytest's capture
"""

import pytest
from httpx import ASGITransport, AsyncClient

from grubdash.config import Settings
from grubdash.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(log_format="text", seed_demo_orders=False)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
