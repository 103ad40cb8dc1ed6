import os

os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from volley_stats.client.api import ApiClient
from volley_stats.db.session import get_session, init_db
from volley_stats.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    return ApiClient(client)


@pytest.fixture
def session_id(client):
    response = client.post("/api/sessions", json={"name": "Practice"})
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def ana(client):
    response = client.post("/api/players", json={"name": "Ana", "jersey_number": 7})
    assert response.status_code == 201
    return response.json()
