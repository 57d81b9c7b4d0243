"""Pytest configuration and fixtures for SiteTrack tests.

Every test gets its own in-memory SQLite database. Access functions are
exercised through the ``db`` session; routes through ``client``.
"""

from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sitetrack.core.config import settings
from sitetrack.core.security import create_access_token
from sitetrack.db.session import init_db
from sitetrack.main import app
from sitetrack.routers import deps


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage_dir(tmp_path, monkeypatch):
    path = tmp_path / "storage"
    monkeypatch.setattr(settings, "STORAGE_DIR", str(path))
    return path


@pytest.fixture
def client(session_factory, storage_dir):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict:
    token = create_access_token({"sub": "user_2abcOperator", "name": "Test Operator"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_id():
    """Syntactically valid id that resolves to nothing."""
    return lambda: uuid.uuid4().hex
