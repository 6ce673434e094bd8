import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import get_conn, get_database
from app.main import create_app
from tests.mocks import FakeDatabase, MockConn


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        PORT=8080,
        CORS_ORIGIN="http://localhost:5173",
        POSTGRES_USER="scheduler",
        POSTGRES_PASSWORD="secret",
    )


@pytest.fixture
def mock_conn():
    return MockConn()


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def app(settings, mock_conn, fake_database):
    app = create_app(settings)

    async def override_get_conn():
        yield mock_conn

    app.dependency_overrides[get_conn] = override_get_conn
    app.dependency_overrides[get_database] = lambda: fake_database
    return app


@pytest.fixture
def client(app):
    # Not entered as a context manager, so startup (migrations, pool) is skipped
    return TestClient(app)
