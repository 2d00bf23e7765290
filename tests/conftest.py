"""Pytest fixtures: the API against an in-memory SQLite database."""

import itertools
import os

# Must be set before anything under app/ reads the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TIMEZONE"] = "UTC"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import Base, build_engine, get_db
from app.main import app


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def api(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _creator(api, path, defaults):
    counter = itertools.count(1)

    def create(**overrides):
        n = next(counter)
        payload = {key: (value.format(n=n) if isinstance(value, str) else value) for key, value in defaults.items()}
        payload.update(overrides)
        response = api.post(path, json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return create


@pytest.fixture()
def make_client(api):
    return _creator(api, "/api/clients", {"company_name": "Company {n}", "email": "contact{n}@example.com"})


@pytest.fixture()
def make_user(api):
    return _creator(api, "/api/users", {"name": "User {n}", "email": "user{n}@example.com"})


@pytest.fixture()
def make_project(api, make_client):
    create = _creator(api, "/api/projects", {"title": "Project {n}"})

    def make(**overrides):
        if "client_id" not in overrides:
            overrides["client_id"] = make_client()["id"]
        return create(**overrides)

    return make


@pytest.fixture()
def make_task(api):
    create = _creator(api, "/api/tasks", {"title": "Task {n}", "due_date": "2030-01-15"})

    def make(project, **overrides):
        overrides.setdefault("project_id", project["id"])
        overrides.setdefault("client_id", project["client_id"])
        return create(**overrides)

    return make


@pytest.fixture()
def make_transaction(api):
    create = _creator(api, "/api/finance/transactions", {"type": "payment", "description": "Transaction {n}"})

    def make(project, amount, **overrides):
        overrides.setdefault("project_id", project["id"])
        return create(amount=amount, **overrides)

    return make
