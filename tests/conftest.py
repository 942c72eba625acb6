"""
Shared fixtures for the person registry test suite.
"""

import pytest
from fastapi.testclient import TestClient

from person_registry.infrastructure.persons.in_memory_repository import (
    InMemoryPersonsRepository,
)
from person_registry.main import create_app
from person_registry.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with empty rate limit counters."""
    limiter.reset()


@pytest.fixture
def repository() -> InMemoryPersonsRepository:
    return InMemoryPersonsRepository()


@pytest.fixture
def client(repository: InMemoryPersonsRepository) -> TestClient:
    """HTTP client over an app backed by the ``repository`` fixture."""
    return TestClient(create_app(repository=repository))


@pytest.fixture
def ada_payload() -> dict[str, str]:
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "studentId": "S1",
        "gender": "F",
    }
