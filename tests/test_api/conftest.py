"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services import database


@pytest.fixture(scope="module")
def client():
    """Create a TestClient backed by the in-memory sample catalog."""
    service = database.DatabaseService()
    service.db_path = None
    database._db_service = service

    with TestClient(app) as c:
        yield c

    database.close_db()
