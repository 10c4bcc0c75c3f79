"""Shared fixtures: isolate every test from the host environment and `.env`."""

import pytest
from fastapi.testclient import TestClient

from message_service.core.config import get_settings, load_settings
from message_service.main import create_application

SETTINGS_ENV = ("APPLICATION_MESSAGE", "HOST", "PORT", "LOG_LEVEL", "PROJECT_NAME", "PROJECT_VERSION")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client():
    """Build a TestClient for an app configured with the given message."""

    def _make(message: str) -> TestClient:
        settings = load_settings(env_file=None, APPLICATION_MESSAGE=message)
        return TestClient(create_application(settings))

    return _make
