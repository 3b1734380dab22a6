"""
Package Sorter — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── standard_package / bulky_package / heavy_package / rejected_package
    │       Valid Package values for each decision
    └── test_client: HTTPX AsyncClient wired to the FastAPI app (no server)
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["ENVIRONMENT"] = "development"  # Keep /docs and /openapi.json mounted

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from package_sorter.models.package import make_package


@pytest.fixture
def standard_package():
    """50 × 30 × 20 cm, 5 kg: neither bulky nor heavy."""
    return make_package(50, 30, 20, 5000)


@pytest.fixture
def bulky_package():
    """One side at exactly 150 cm."""
    return make_package(150, 30, 20, 5000)


@pytest.fixture
def heavy_package():
    """Small box at 25 kg."""
    return make_package(50, 30, 20, 25000)


@pytest.fixture
def rejected_package():
    """Bulky by dimension and heavy."""
    return make_package(150, 30, 20, 25000)


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from package_sorter.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
