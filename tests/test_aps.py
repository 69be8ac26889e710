from urllib.parse import parse_qs

import httpx
import pytest
from httpx import AsyncClient

from facility_api.core.aps import ApsTokenClient
from facility_api.core.dependencies import get_token_client
from facility_api.main import app

TOKEN_URL = "https://developer.api.autodesk.com/authentication/v2/token"


def make_token_client(handler) -> ApsTokenClient:
    return ApsTokenClient(
        client_id="client-id",
        client_secret="client-secret",
        token_url=TOKEN_URL,
        scope="data:read viewables:read",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_token_endpoint_relays_token(client: AsyncClient, fake_token_client):
    response = await client.get("/api/aps/oauth/token")

    assert response.status_code == 200
    assert response.json() == fake_token_client.token
    assert fake_token_client.calls == 1


@pytest.mark.asyncio
async def test_every_call_is_a_fresh_exchange(client: AsyncClient, fake_token_client):
    await client.get("/api/aps/oauth/token")
    await client.get("/api/aps/oauth/token")

    assert fake_token_client.calls == 2


@pytest.mark.asyncio
async def test_exchange_sends_client_credentials_grant():
    """The grant is form-encoded and posted to the token URL"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(
            200,
            json={"access_token": "abc", "token_type": "Bearer", "expires_in": 3599},
        )

    token = await make_token_client(handler).exchange_credentials()

    assert token == {"access_token": "abc", "token_type": "Bearer", "expires_in": 3599}
    assert seen["method"] == "POST"
    assert seen["url"] == TOKEN_URL
    assert seen["content_type"] == "application/x-www-form-urlencoded"
    assert seen["form"] == {
        "client_id": ["client-id"],
        "client_secret": ["client-secret"],
        "grant_type": ["client_credentials"],
        "scope": ["data:read viewables:read"],
    }


@pytest.mark.asyncio
async def test_upstream_error_status_is_reported():
    """Non-2xx from APS becomes a 500 carrying the upstream status and body"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text='{"developerMessage":"bad client"}')

    app.dependency_overrides[get_token_client] = lambda: make_token_client(handler)
    try:
        async with AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as ac:
            response = await ac.get("/api/aps/oauth/token")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "error": "token fetch failed",
        "status": 401,
        "details": '{"developerMessage":"bad client"}',
    }


@pytest.mark.asyncio
async def test_network_exception_is_reported():
    """A transport failure becomes a 500 with the exception message"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    app.dependency_overrides[get_token_client] = lambda: make_token_client(handler)
    try:
        async with AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as ac:
            response = await ac.get("/api/aps/oauth/token")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "token exception", "details": "connection refused"}
