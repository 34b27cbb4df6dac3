import pytest
from fastapi.testclient import TestClient

from items_shared.config import Settings
from app.entrypoints.fastapi.main import create_app


@pytest.fixture
def settings():
    return Settings(SERVICE_NAME="items-service-test", LOG_LEVEL="DEBUG")


@pytest.fixture
def client(settings):
    """Cliente HTTP en proceso contra la app."""
    with TestClient(create_app(settings)) as c:
        yield c
