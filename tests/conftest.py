"""
Ship API test configuration

Shared pytest fixtures and marker registration.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from shipapi.main import create_app
from shipapi.models import ShipModel
from shipapi.services.ship import Ship, get_ship_store


# ============================================================================
# pytest marker registration
# ============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "integration: tests that run the full application lifespan"
    )
    config.addinivalue_line(
        "markers", "unit: unit tests, no external dependencies"
    )


# ============================================================================
# Common fixtures
# ============================================================================

SHIP_ID = "1234"


@pytest.fixture
def ship_id() -> str:
    return SHIP_ID


@pytest.fixture
def normandy(ship_id) -> ShipModel:
    """A ship with two visited places"""
    return ShipModel(
        id=ship_id,
        name="Nermandy 2",
        x_coordinate=4,
        y_coordinate=6,
        visited_places=[10, 11],
    )


@pytest.fixture
def ship_store() -> AsyncMock:
    """Test double standing in for the ship store"""
    return AsyncMock(spec=Ship)


@pytest.fixture
def client(ship_store):
    """HTTP client for an app whose ship store is replaced by ``ship_store``"""
    app = create_app()
    app.dependency_overrides[get_ship_store] = lambda: ship_store
    test_client = TestClient(app)
    yield test_client
    test_client.close()
    app.dependency_overrides.clear()
