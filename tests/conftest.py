"""Shared pytest fixtures: in-memory database, API client, users and a seeded project."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.hashing import Hasher
from app.core.security import create_access_token
from app.db.models import User
from app.db.session import Base, get_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_user(db, email: str, name: str = "Test User", password: str = "secret") -> User:
    user = User(email=email, name=name, hashed_password=Hasher.hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db) -> User:
    return make_user(db, "owner@example.com", "Owner")


@pytest.fixture
def other_user(db) -> User:
    return make_user(db, "intruder@example.com", "Intruder")


@pytest.fixture
def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def other_headers(other_user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def project(client, auth_headers) -> dict:
    """A project owned by ``user`` with the default resource catalog."""
    resp = client.post("/projects/", json={"name": "Portal", "customer": "ACME"}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def feature(client, auth_headers, project) -> dict:
    """An epic + feature inside ``project``."""
    resp = client.post(f"/projects/{project['id']}/epics", json={"name": "Onboarding"}, headers=auth_headers)
    assert resp.status_code == 201
    epic = resp.json()
    resp = client.post(f"/epics/{epic['id']}/features", json={"name": "Login"}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


def resource_type_id(project: dict, name: str) -> int:
    return next(rt["id"] for rt in project["resource_types"] if rt["name"] == name)
