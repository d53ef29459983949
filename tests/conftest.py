import pytest
from fastapi.testclient import TestClient

from bookshelf_api.app.core.config import Settings
from bookshelf_api.app.core.store import BookStore
from bookshelf_api.app.main import create_app
from bookshelf_api.app.services.book_service import BookService


@pytest.fixture
def store():
    return BookStore()


@pytest.fixture
def service(store):
    # Fresh, empty collection for every test
    return BookService(store)


@pytest.fixture
def app_settings():
    return Settings(message_locale="id", book_id_length=16)


@pytest.fixture
def client(app_settings):
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client
