import pytest
from fastapi.testclient import TestClient

from arbdash.main import create_app
from arbdash.store import MemoryStore


@pytest.fixture
def store():
    """Empty store."""
    return MemoryStore()


@pytest.fixture
def seeded_store():
    """Store loaded with the demo data."""
    return MemoryStore(seed=True)


@pytest.fixture
def client(seeded_store):
    return TestClient(create_app(seeded_store))
