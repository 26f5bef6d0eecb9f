import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.storage import StoreRegistry, get_registry


@pytest.fixture
def registry():
    """Install a fresh, unseeded registry for the duration of a test."""
    fresh = StoreRegistry()
    app.dependency_overrides[get_registry] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture
def client(registry):
    return TestClient(app)
