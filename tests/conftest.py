import sys
import os
import pytest

# Add project root to path so app and its packages are importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

import app as app_module
from showcase.auth import SessionManager
from showcase.stores import InMemoryPeerStore, InMemoryProjectStore
from fakes import FakeProvider
from utils.errors import UpstreamError


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=UpstreamError("quota exceeded"))


@pytest.fixture
def client(provider):
    """TestClient with a fake model and fresh in-memory stores."""
    api = app_module.app
    projects = InMemoryProjectStore()
    peers = InMemoryPeerStore()
    sessions = SessionManager()
    api.dependency_overrides[app_module.get_completion_provider] = lambda: provider
    api.dependency_overrides[app_module.get_project_store] = lambda: projects
    api.dependency_overrides[app_module.get_peer_store] = lambda: peers
    api.dependency_overrides[app_module.get_session_manager] = lambda: sessions
    yield TestClient(api)
    api.dependency_overrides.clear()


@pytest.fixture
def token(client):
    r = client.post("/auth/login", json={"register_number": "2412345678"})
    assert r.status_code == 200
    return r.json()["token"]
