# tests/api/conftest.py

import pytest
from starlette.testclient import TestClient

from echotext.config import Settings
from echotext.main import create_app

ORIGIN = "https://echo.test"


@pytest.fixture
def make_client():
    def _make(**overrides) -> TestClient:
        settings = Settings(PUBLIC_ORIGIN=ORIGIN, LOG_JSON=False, **overrides)
        return TestClient(create_app(settings))
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
