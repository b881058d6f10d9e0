import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import StorageError
from app.db.models.track import Track
from app.services.track_registry import TrackRegistry


def test_resolve_creates_track_with_fallbacks(registry, db):
    track = registry.resolve("abc123", "Song A", "Artist A")

    assert track.id is not None
    assert track.external_id == "abc123"
    assert track.title == "Song A"
    assert track.artist_name == "Artist A"
    assert db.query(Track).count() == 1


def test_resolve_defaults_missing_metadata(registry):
    track = registry.resolve("no-meta")

    assert track.title == "Unknown title"
    assert track.artist_name == ""


def test_resolve_is_idempotent_and_keeps_first_metadata(registry, db):
    first = registry.resolve("xyz", "First title", "First artist")
    second = registry.resolve("xyz", "Other title", "Other artist")

    assert first.id == second.id
    assert second.title == "First title"
    assert second.artist_name == "First artist"
    assert db.query(Track).filter(Track.external_id == "xyz").count() == 1


def test_find_does_not_create(registry, db):
    assert registry.find("missing") is None
    assert db.query(Track).count() == 0


def test_concurrent_insert_rereads_winner(session_factory, monkeypatch):
    # The winner commits from its own session after the loser's lookup missed
    winner_db = session_factory()
    winner = TrackRegistry(winner_db).resolve("race", "Winner title", "Winner")

    loser_db = session_factory()
    loser = TrackRegistry(loser_db)
    real_find = loser._find_by_external_id
    calls = {"n": 0}

    def stale_first_lookup(external_id):
        calls["n"] += 1
        if calls["n"] == 1:
            return None
        return real_find(external_id)

    monkeypatch.setattr(loser, "_find_by_external_id", stale_first_lookup)

    track = loser.resolve("race", "Loser title", "Loser")

    assert track.id == winner.id
    assert track.title == "Winner title"
    assert loser_db.query(Track).filter(Track.external_id == "race").count() == 1
    winner_db.close()
    loser_db.close()


def test_store_failure_surfaces_as_storage_error(registry, monkeypatch):
    def broken(external_id):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(registry, "_find_by_external_id", broken)

    with pytest.raises(StorageError):
        registry.resolve("abc")
