"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from fuzzycat_gateway.api.main import create_app
from fuzzycat_gateway.api.dependencies import get_current_time


# Fixed server clock so quotes without an enrollment date are reproducible
FROZEN_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def enrollment_date() -> datetime:
    """Enrollment instant shared by schedule tests"""
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now() -> datetime:
    """Instant the pinned server clock reports"""
    return FROZEN_NOW


@pytest.fixture
def app():
    """FastAPI app with the server clock pinned"""
    app = create_app()
    app.dependency_overrides[get_current_time] = lambda: FROZEN_NOW
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)
