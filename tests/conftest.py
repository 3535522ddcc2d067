import pytest
from fastapi.testclient import TestClient

from product_api.core.config import Settings
from product_api.db.base import Database
from product_api.main import create_app


def _settings(**overrides) -> Settings:
    values = {
        "DATABASE_URI": "sqlite://",
        "CREATE_TABLES": True,
        "EXPOSE_ERROR_DETAILS": False,
        "STRICT_UPDATE_ERRORS": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_settings():
    """Settings for an in-memory SQLite database, with optional overrides."""
    return _settings


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def database(settings):
    """Fresh in-memory database with the products table created."""
    db = Database(settings)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
