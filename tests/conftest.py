import pytest
from fastapi.testclient import TestClient

from bookcatalog.catalog import CatalogStore
from bookcatalog.config import Settings
from bookcatalog.main import create_app


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def seeded_store():
    s = CatalogStore()
    s.seed()
    return s


@pytest.fixture
def client(seeded_store):
    app = create_app(store=seeded_store, settings=Settings(seed_on_startup=False))
    with TestClient(app) as c:
        yield c
