"""
Shared test fixtures: API test client.
"""

import pytest
from fastapi.testclient import TestClient

from downtime_cost.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
