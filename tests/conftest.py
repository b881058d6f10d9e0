import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import build_engine, get_db
from app.db import models  # noqa: F401
from app.db.models.user import User
from app.main import app
from app.services.history_service import HistoryService
from app.services.playlist_service import PlaylistService
from app.services.track_registry import TrackRegistry


@pytest.fixture()
def engine():
    """Fresh in-memory database per test; foreign keys enforced"""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def make_user(db, user_id, username):
    user = User(id=user_id, email=f"{username}@example.com", username=username, display_name=username)
    db.add(user)
    db.commit()
    return user


@pytest.fixture()
def alice(db):
    return make_user(db, "aaaaaaaa-0000-0000-0000-000000000001", "alice")


@pytest.fixture()
def bob(db):
    return make_user(db, "bbbbbbbb-0000-0000-0000-000000000002", "bob")


@pytest.fixture()
def registry(db):
    return TrackRegistry(db)


@pytest.fixture()
def playlists(db, registry):
    return PlaylistService(db, registry)


@pytest.fixture()
def history(db, registry):
    return HistoryService(db, registry)


@pytest.fixture()
def client(session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def anyio_backend():
    return "asyncio"
