"""Pytest fixtures — fresh SQLite database per test, plus API helpers."""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from group_api.database import Base, get_db
from group_api.main import app

# Import all models so they register with Base.metadata
from group_api.models.user import User              # noqa: F401
from group_api.models.event import Event            # noqa: F401
from group_api.models.group import Group, GroupEvent  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session for direct inspection."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: drive the API the way a client would
# ---------------------------------------------------------------------------
def sign_up(client: TestClient, email: str, password: str = "secret") -> dict:
    """Helper — POST /sign-up and return the `user` JSON."""
    resp = client.post("/sign-up", json={"credentials": {
        "email": email,
        "password": password,
        "password_confirmation": password,
    }})
    assert resp.status_code == 201, resp.text
    return resp.json()["user"]


def sign_in(client: TestClient, email: str, password: str = "secret") -> dict:
    """Helper — POST /sign-in and return the `user` JSON including `token`."""
    resp = client.post("/sign-in", json={"credentials": {"email": email, "password": password}})
    assert resp.status_code == 201, resp.text
    return resp.json()["user"]


def create_test_user(client: TestClient, email: str = "user@example.com") -> dict:
    """Helper — sign up and sign in; returns the signed-in user (id, email, token)."""
    sign_up(client, email)
    return sign_in(client, email)


def auth(user: dict) -> dict:
    return {"Authorization": f"Bearer {user['token']}"}


def create_test_group(client: TestClient, user: dict, name: str = "Test Group", **fields) -> dict:
    """Helper — POST /groups as `user` and return the `group` JSON."""
    body = {"name": name, "description": "A group for testing", **fields}
    resp = client.post("/groups", json={"group": body}, headers=auth(user))
    assert resp.status_code == 201, resp.text
    return resp.json()["group"]


def create_test_event(client: TestClient, user: dict, title: str = "Meetup") -> dict:
    """Helper — POST /events as `user` and return the `event` JSON."""
    resp = client.post("/events", json={"event": {"title": title}}, headers=auth(user))
    assert resp.status_code == 201, resp.text
    return resp.json()["event"]
