"""Shared pytest fixtures."""

import copy
from typing import Any
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from postkeeper.app import App
from postkeeper.config import Config
from postkeeper.core.core import Core
from postkeeper.core.modules.user.models import User
from postkeeper.errors import ConflictError, NotFoundError
from postkeeper.web.server import create_fastapi_app

TEST_SECRET = "test-signing-key"


class InMemoryUserStore:
    """UserStore fake holding raw documents, so every read returns a fresh copy."""

    def __init__(self) -> None:
        self.documents: dict[UUID, dict[str, Any]] = {}

    async def on_start(self) -> None:
        pass

    async def on_stop(self) -> None:
        pass

    async def insert(self, user: User) -> None:
        if any(doc["email"] == user.email for doc in self.documents.values()):
            raise ConflictError(f"Email '{user.email}' is already registered")
        self.documents[user.id] = user.to_mongo()

    async def find_by_email(self, email: str) -> User | None:
        doc = next((d for d in self.documents.values() if d["email"] == email), None)
        return User.from_mongo(copy.deepcopy(doc))

    async def find_by_id(self, user_id: UUID) -> User | None:
        return User.from_mongo(copy.deepcopy(self.documents.get(user_id)))

    async def replace(self, user: User) -> None:
        if user.id not in self.documents:
            raise NotFoundError("User not found")
        self.documents[user.id] = user.to_mongo()

    def delete(self, user_id: UUID) -> None:
        """Remove a user out-of-band."""
        del self.documents[user_id]


@pytest.fixture
def config():
    return Config(
        database_url="mongodb://localhost:27017/postkeeper_test",
        host="127.0.0.1",
        port=4000,
        debug=True,
        token_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def core(config, store):
    return Core(config, store)


@pytest.fixture
def app(config, store):
    return App(config, store)


@pytest.fixture
def client(app, config):
    with TestClient(create_fastapi_app(app, config)) as test_client:
        yield test_client


@pytest.fixture
def register_and_login(client):
    """Register a user over HTTP and return its Authorization headers."""

    def _register_and_login(email: str = "a@x.com", password: str = "pw1", name: str = "Alice") -> dict[str, str]:
        response = client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password, "confirmPassword": password},
        )
        assert response.status_code == 200, response.json()
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.json()
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register_and_login
