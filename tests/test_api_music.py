from unittest.mock import AsyncMock

import httpx
import pytest

from app.api.dependencies import get_music_service
from app.core.audius_client import AudiusClient
from app.core.errors import CatalogError
from app.main import app
from app.services.music_service import MusicService
from tests.conftest import auth

AUDIUS_RESULTS = [
    {
        "id": "D7KyD",
        "title": "Night Drive",
        "user": {"name": "Rina"},
        "artwork": {"480x480": "https://img/480.jpg", "1000x1000": "https://img/1000.jpg"},
        "duration": 215,
    },
    {"id": "Q1x", "title": "No Art", "user": None, "artwork": None, "duration": None},
]


@pytest.fixture()
def token(client):
    return client.post("/api/v1/auth/signup", json={"email": "u@example.com"}).json()["token"]


@pytest.fixture()
def catalog():
    mock_client = AudiusClient(base_url="https://audius.test", app_name="test_app")
    mock_client.search = AsyncMock(return_value=AUDIUS_RESULTS)
    app.dependency_overrides[get_music_service] = lambda: MusicService(mock_client)
    yield mock_client
    app.dependency_overrides.pop(get_music_service, None)


def test_search_normalizes_results(client, token, catalog):
    response = client.get("/api/v1/search", params={"q": "night"}, headers=auth(token))

    assert response.status_code == 200
    items = response.json()["items"]
    assert items[0] == {
        "id": "D7KyD",
        "title": "Night Drive",
        "artist": "Rina",
        "artwork": "https://img/480.jpg",
        "duration": 215,
    }
    assert items[1]["artist"] == ""
    assert items[1]["artwork"] == ""
    catalog.search.assert_awaited_once_with("night")


def test_empty_query_skips_catalog(client, token, catalog):
    response = client.get("/api/v1/search", headers=auth(token))

    assert response.json() == {"items": []}
    catalog.search.assert_not_awaited()


def test_catalog_failure_is_bad_gateway(client, token, catalog):
    catalog.search.side_effect = CatalogError("Audius search failed")

    response = client.get("/api/v1/search", params={"q": "x"}, headers=auth(token))

    assert response.status_code == 502
    assert response.json() == {"error": "Audius search failed"}


def test_stream_redirects_with_query_token(client, token, catalog):
    response = client.get(
        "/api/v1/tracks/D7KyD/stream", params={"token": token}, follow_redirects=False
    )

    assert response.status_code == 307
    assert response.headers["location"] == "https://audius.test/v1/tracks/D7KyD/stream?app_name=test_app"
    assert response.headers["cache-control"] == "no-store"


def test_stream_requires_token(client, catalog):
    assert client.get("/api/v1/tracks/D7KyD/stream", follow_redirects=False).status_code == 401


@pytest.mark.anyio
async def test_client_raises_catalog_error_on_http_failure(monkeypatch):
    def handler(request):
        return httpx.Response(500)

    transport = httpx.MockTransport(handler)
    real_async_client = httpx.AsyncClient
    monkeypatch.setattr(
        "app.core.audius_client.httpx.AsyncClient",
        lambda **kwargs: real_async_client(transport=transport, **kwargs),
    )

    with pytest.raises(CatalogError):
        await AudiusClient(base_url="https://audius.test").search("x")


@pytest.mark.anyio
async def test_client_returns_data_field(monkeypatch):
    def handler(request):
        assert request.url.params["query"] == "x"
        assert request.url.params["app_name"] == "test_app"
        return httpx.Response(200, json={"data": AUDIUS_RESULTS})

    transport = httpx.MockTransport(handler)
    real_async_client = httpx.AsyncClient
    monkeypatch.setattr(
        "app.core.audius_client.httpx.AsyncClient",
        lambda **kwargs: real_async_client(transport=transport, **kwargs),
    )

    results = await AudiusClient(base_url="https://audius.test", app_name="test_app").search("x")
    assert [r["id"] for r in results] == ["D7KyD", "Q1x"]
