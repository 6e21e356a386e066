"""Shared fixtures: an app wired to an in-memory MongoDB double."""
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from wanderlist.config import Settings
from wanderlist.main import create_app
from wanderlist.services.user_store import UserStore


@pytest.fixture
def settings():
    return Settings(session_secret="test-secret", log_level="WARNING")


@pytest.fixture
def user_collection():
    return AsyncMongoMockClient()["myDB"]["users"]


@pytest.fixture
def user_store(user_collection):
    return UserStore(user_collection)


@pytest.fixture
def app(settings, user_store):
    return create_app(settings, user_store=user_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client, username="alice", password="wonderland"):
    return client.post(
        "/register",
        data={"username": username, "password": password},
        follow_redirects=False
    )


def login(client, username="alice", password="wonderland"):
    return client.post(
        "/",
        data={"username": username, "password": password},
        follow_redirects=False
    )


@pytest.fixture
def logged_in(client):
    """A client with a registered and logged-in ``alice``."""
    register(client)
    login(client)
    return client
