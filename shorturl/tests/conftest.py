import pytest
from fastapi.testclient import TestClient

from shorturl.core.config import Settings
from shorturl.db.store import URLStore
from shorturl.main import create_app
from shorturl.services.shortener import URLService


# In-memory SQLite, one fresh database per test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"
TEST_BASE_URL = "http://sho.rt"


@pytest.fixture
def store():
    """Creates a fresh, open store for each test."""
    url_store = URLStore(SQLALCHEMY_TEST_DATABASE_URL).open()
    try:
        yield url_store
    finally:
        url_store.close()


@pytest.fixture
def service(store):
    return URLService(store, base_url=TEST_BASE_URL)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        DATABASE_URL=SQLALCHEMY_TEST_DATABASE_URL,
        BASE_URL=TEST_BASE_URL,
        STATIC_DIR=str(tmp_path / "public"),
    )


@pytest.fixture
def app(test_settings, store):
    return create_app(settings=test_settings, store=store)


@pytest.fixture
def client(app):
    """Creates a test client wired to the per-test store."""
    yield TestClient(app)


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
