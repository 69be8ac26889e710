from typing import Any, Dict, List, Optional

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from facility_api.core.dependencies import get_token_client, get_warehouse
from facility_api.main import app


# Stands in for BigQuery: remembers every call and returns canned rows
class FakeWarehouse:
    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.calls: List[tuple] = []

    async def execute(self, template_name: str, params: Dict[str, Any]):
        self.calls.append((template_name, params))
        if self.error is not None:
            raise self.error
        return self.rows


class FakeTokenClient:
    def __init__(self, token: Optional[Dict[str, Any]] = None):
        self.token = token or {
            "access_token": "eyJhbGciOi.fake",
            "token_type": "Bearer",
            "expires_in": 3599,
        }
        self.calls = 0

    async def exchange_credentials(self):
        self.calls += 1
        return self.token


@pytest_asyncio.fixture(scope="function")
async def fake_warehouse():
    return FakeWarehouse()


@pytest_asyncio.fixture(scope="function")
async def fake_token_client():
    return FakeTokenClient()


# Client (the lifespan is not run, so no real BigQuery/APS clients are built)
@pytest_asyncio.fixture(scope="function")
async def client(fake_warehouse, fake_token_client):
    app.dependency_overrides[get_warehouse] = lambda: fake_warehouse
    app.dependency_overrides[get_token_client] = lambda: fake_token_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
