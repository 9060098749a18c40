import pytest
from fastapi.testclient import TestClient

from bookstore.catalog.schemas import Book
from bookstore.catalog.store import CatalogStore
from bookstore.main import create_app
from bookstore.storage import UserStore


@pytest.fixture
def catalog():
    return CatalogStore.from_seed()


@pytest.fixture
def users():
    return UserStore()


@pytest.fixture
def client(catalog, users):
    return TestClient(create_app(catalog=catalog, users=users))


@pytest.fixture
def reviewed_book():
    return Book(
        isbn="42",
        title="Things Fall Apart",
        author="Chinua Achebe",
        reviews={"reader1": "A classic."},
    )
