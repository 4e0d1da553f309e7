import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_reference_store
from app.main import app
from app.modules.locations.repository import InMemoryReferenceStore
from app.modules.locations.resolver import AddressIdentifierResolver
from tests.fakes import UnavailableStore


@pytest.fixture
def store():
    return InMemoryReferenceStore.from_seed()


@pytest.fixture
def resolver(store):
    return AddressIdentifierResolver(store)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_reference_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unavailable_client():
    app.dependency_overrides[get_reference_store] = lambda: UnavailableStore()
    yield TestClient(app)
    app.dependency_overrides.clear()
