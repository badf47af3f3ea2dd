import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.core.storage import Inventory
from bookstore_api.app.main import create_app


@pytest.fixture
def inventory():
    return Inventory()


@pytest.fixture
def client(inventory):
    # A new app per test starts from the seed data.
    return TestClient(create_app(inventory))
