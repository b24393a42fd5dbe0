"""Root conftest for tests."""

import pytest
from fastapi.testclient import TestClient

from core.mock_data import build_demo_store


@pytest.fixture
def store():
    """Fresh demo snapshot."""
    return build_demo_store()


@pytest.fixture
def app():
    # Module-level app; its snapshot is read-only so tests can share it.
    from main import app

    return app


@pytest.fixture
def client(app):
    return TestClient(app)
