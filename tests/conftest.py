"""Pytest fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, AsyncMock

from biztime.config import Settings
from biztime.main import create_app
from biztime.services import LedgerStore


def _seed(store: LedgerStore) -> None:
    """Two companies, two industries, one membership, two invoices for abc."""
    with store.transaction() as db:
        db.execute_write(
            "INSERT INTO companies (code, name, description) VALUES "
            "('abc', 'Company ABC', 'Description ABC'), "
            "('xyz', 'Company XYZ', 'Description XYZ')"
        )
        db.execute_write(
            "INSERT INTO industries (code, name) VALUES "
            "('acct', 'Accounting'), ('food', 'Food Service')"
        )
        db.execute_write(
            "INSERT INTO companies_industries (ind_code, comp_code) VALUES ('acct', 'abc')"
        )
        db.execute_write(
            "INSERT INTO invoices (comp_code, amt) VALUES ('abc', 100.00), ('abc', 200.00)"
        )


@pytest.fixture
def settings():
    """Settings that never touch the on-disk database."""
    return Settings(database_url="sqlite://", create_schema=False)


@pytest.fixture
def empty_store():
    """In-memory SQLite store with the schema and no rows."""
    store = LedgerStore("sqlite://")
    store.create_schema()
    yield store
    store.disconnect()


@pytest.fixture
def store(empty_store):
    """In-memory SQLite store seeded with sample rows."""
    _seed(empty_store)
    return empty_store


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Test client over the seeded store."""
    return TestClient(app)


@pytest.fixture
def empty_client(settings, empty_store):
    """Test client over an empty store."""
    return TestClient(create_app(settings=settings, store=empty_store))


@pytest.fixture
def mock_store():
    """Mock store for failure paths."""
    mock = MagicMock(spec=LedgerStore)
    mock.health_check = AsyncMock(return_value=(True, None))
    mock.execute_query = MagicMock(return_value=[])
    mock.execute_one = MagicMock(return_value=None)
    mock.execute_write = MagicMock(return_value=1)
    return mock


@pytest.fixture
def mock_client(settings, mock_store):
    """Test client whose routers receive the mock store."""
    return TestClient(create_app(settings=settings, store=mock_store))
