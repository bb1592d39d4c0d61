"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, Any
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.core.database import init_db
from app.main import app


@pytest.fixture
def engine(tmp_path):
    """SQLite engine on a fresh temporary database file with tables created."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session on the temporary database."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """API client whose requests use the temporary database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Valid job posting as the client sends it."""
    return {
        "id": "a1",
        "title": "Clear driveway",
        "description": "Double driveway, about 20cm overnight.",
        "city": "Oakville",
        "price": 40,
        "type": "Shoveling",
        "isHighPriority": True,
        "postedAt": "2026-02-26T08:00:00Z",
        "postedBy": "Alice",
        "status": "open",
    }


@pytest.fixture
def make_payload(job_payload):
    """Build job payloads that differ from the default in a few fields."""

    def _make(**overrides) -> Dict[str, Any]:
        payload = dict(job_payload)
        payload.update(overrides)
        return payload

    return _make
