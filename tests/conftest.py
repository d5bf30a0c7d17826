import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.config import Settings, get_settings

SIGNALING_URL = "http://signaling.test:4000"


@pytest.fixture
def settings():
    return Settings(SIGNALING_SERVER_URL=SIGNALING_URL, SERVICE_NAME="Video Call Service")


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
