import pytest
from fastapi.testclient import TestClient

from users_api.entrypoints.api import create_app
from users_api.services.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(USERS_API_URL_PREFIX="/users", USERS_API_DB_TYPE="mock")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
