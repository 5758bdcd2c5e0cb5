import itertools
import os

# Must be set before roomchat.config.settings is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH_TOKEN_SECRET", "test-secret-for-roomchat-suite-0123456789")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from roomchat.fastapi_app import create_fastapi_app
from roomchat.setup.ioc.container import AppProvider

DEFAULT_PASSWORD = "password123"

_emails = itertools.count(1)


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'roomchat-test.db'}"


@pytest.fixture()
def app(database_url):
    """Create and configure a new FastAPI app instance for each test."""
    container = make_async_container(
        AppProvider(database_url=database_url, bcrypt_rounds=4)
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; entering it runs startup (schema creation)."""
    with TestClient(app) as test_client:
        yield test_client


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class RegisteredUser:
    def __init__(self, payload: dict):
        self.id = payload["user"]["id"]
        self.email = payload["user"]["email"]
        self.full_name = payload["user"]["fullName"]
        self.token = payload["token"]
        self.headers = bearer(self.token)


@pytest.fixture()
def register(client):
    """Register a fresh user and return its id, token and auth headers."""

    def _register(name: str = "user", password: str = DEFAULT_PASSWORD) -> RegisteredUser:
        email = f"{name}{next(_emails)}@example.com"
        response = client.post(
            "/auth/register",
            json={"email": email, "password": password, "fullName": name.title()},
        )
        assert response.status_code == 201, response.text
        return RegisteredUser(response.json())

    return _register


@pytest.fixture()
def create_conversation(client):
    def _create(owner: RegisteredUser, *others: RegisteredUser, name: str = "Room") -> dict:
        response = client.post(
            "/conversations",
            json={"name": name, "participantIds": [u.id for u in others] or [owner.id]},
            headers=owner.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def post_message(client):
    def _post(author: RegisteredUser, conversation_id: str, content: str, reply_to_id=None):
        body = {"content": content}
        if reply_to_id is not None:
            body["replyToId"] = reply_to_id
        return client.post(
            f"/conversations/{conversation_id}/messages", json=body, headers=author.headers
        )

    return _post
