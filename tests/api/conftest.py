"""Shared fixtures for API tests."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from perfkit.api.performance import get_medusa_client
from perfkit.infrastructure.medusa_client import MedusaClient
from perfkit.main import app


@pytest.fixture
def mock_medusa_client() -> MagicMock:
    """Create a mock platform client."""
    client = MagicMock(spec=MedusaClient)
    client.update_product = AsyncMock()
    client.query_product = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def client(mock_medusa_client: MagicMock) -> Iterator[TestClient]:
    """Create test client with the platform client overridden."""
    app.dependency_overrides[get_medusa_client] = lambda: mock_medusa_client
    yield TestClient(app)
    app.dependency_overrides.clear()
