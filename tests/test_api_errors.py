from app.core.errors import StorageError
from app.services.playlist_service import PlaylistService
from tests.conftest import auth


def _signup(client):
    return client.post("/api/v1/auth/signup", json={"email": "u@example.com"}).json()["token"]


def test_storage_error_is_service_unavailable(client, monkeypatch):
    token = _signup(client)

    def unavailable(self, principal_id):
        raise StorageError("Failed to list playlists")

    monkeypatch.setattr(PlaylistService, "list_playlists", unavailable)

    response = client.get("/api/v1/playlists", headers=auth(token))

    assert response.status_code == 503
    assert response.json() == {"error": "Failed to list playlists"}


def test_unexpected_error_hides_details(client, monkeypatch):
    token = _signup(client)

    def explode(self, principal_id):
        raise RuntimeError("secret connection string")

    monkeypatch.setattr(PlaylistService, "list_playlists", explode)

    response = client.get("/api/v1/playlists", headers=auth(token))

    assert response.status_code == 500
    assert response.json() == {"error": "Internal error"}
    assert "secret" not in response.text
