import os

# Settings se resuelve al importar vyeya; fijar el entorno antes
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vyeya.api import deps
from vyeya.core.database import Base, init_db
from vyeya.crud import user as user_crud
from vyeya.main import app
from vyeya.schemas.user import UserCreate

API = "/api/v1"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
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
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def buyer(db):
    return user_crud.create(
        db,
        obj_in=UserCreate(email="buyer@example.com", password="secret123", name="Buyer"),
    )


def register(client, email, password="secret123", name="Test User", role=None):
    payload = {"email": email, "password": password, "name": name}
    if role is not None:
        payload["role"] = role
    response = client.post(f"{API}/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def buyer_headers(client):
    return bearer(register(client, "buyer@example.com", name="Buyer")["token"])


@pytest.fixture
def grower_headers(client):
    return bearer(register(client, "grower@example.com", name="Grower", role="grower")["token"])
