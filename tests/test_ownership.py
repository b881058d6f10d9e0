import pytest

from app.core.errors import NotFound
from app.db.models.playlist import Playlist
from app.services.ownership import authorize, ensure_owned


def test_owner_is_allowed():
    playlist = Playlist(id=1, owner_id="user-a", name="Mine")
    assert authorize("user-a", playlist) is True
    assert ensure_owned("user-a", playlist) is playlist


def test_other_user_is_denied():
    playlist = Playlist(id=1, owner_id="user-a", name="Mine")
    assert authorize("user-b", playlist) is False


def test_missing_and_foreign_look_the_same():
    playlist = Playlist(id=1, owner_id="user-a", name="Mine")

    with pytest.raises(NotFound) as missing:
        ensure_owned("user-b", None)
    with pytest.raises(NotFound) as foreign:
        ensure_owned("user-b", playlist)

    assert str(missing.value) == str(foreign.value)
