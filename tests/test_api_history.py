import pytest

from app.db.models.track import Track
from tests.conftest import auth


@pytest.fixture()
def token(client):
    return client.post("/api/v1/auth/signup", json={"email": "u@example.com"}).json()["token"]


def test_record_list_and_summary(client, token):
    created = client.post(
        "/api/v1/recently-played",
        json={"audius_track_id": "abc", "track_title": "Song", "artist_name": "Artist", "seconds_listened": 30},
        headers=auth(token),
    )
    assert created.status_code == 201
    assert created.json()["seconds_listened"] == 30

    # track_id is accepted as an alias
    client.post("/api/v1/recently-played", json={"track_id": "def"}, headers=auth(token))

    items = client.get("/api/v1/recently-played", headers=auth(token)).json()["items"]
    assert [item["track"]["external_id"] for item in items] == ["def", "abc"]
    assert items[1]["track"]["title"] == "Song"
    assert items[0]["track"]["title"] == "Unknown title"

    summary = client.get("/api/v1/stats/summary", headers=auth(token))
    assert summary.json() == {"totalPlays": 2}


def test_record_requires_track(client, token):
    response = client.post("/api/v1/recently-played", json={"track_title": "x"}, headers=auth(token))
    assert response.status_code == 400
    assert response.json()["field"] == "audius_track_id"


def test_double_play_keeps_first_title(client, token, db):
    client.post("/api/v1/recently-played", json={"audius_track_id": "xyz", "track_title": "First"}, headers=auth(token))
    client.post("/api/v1/recently-played", json={"audius_track_id": "xyz", "track_title": "Second"}, headers=auth(token))

    tracks = db.query(Track).filter(Track.external_id == "xyz").all()
    assert len(tracks) == 1
    assert tracks[0].title == "First"


def test_history_bound(client, token):
    for i in range(60):
        client.post("/api/v1/recently-played", json={"audius_track_id": f"t{i}"}, headers=auth(token))

    items = client.get("/api/v1/recently-played", headers=auth(token)).json()["items"]
    assert len(items) == 50
    assert items[0]["track"]["external_id"] == "t59"
    assert client.get("/api/v1/stats/summary", headers=auth(token)).json() == {"totalPlays": 60}


def test_malformed_seconds_is_bad_request(client, token):
    response = client.post(
        "/api/v1/recently-played",
        json={"audius_track_id": "abc", "seconds_listened": "abc"},
        headers=auth(token),
    )

    assert response.status_code == 400
    assert response.json()["field"] == "seconds_listened"
