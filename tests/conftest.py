"""
tests/conftest.py — Shared pytest fixtures for unit and integration tests.

The app is pointed at an in-memory SQLite database before anything from
patient_registry is imported. Each TestClient context runs the lifespan,
which creates the schema on startup and disposes the engine on shutdown,
so every test starts from an empty table.
"""
from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTO_CREATE_SCHEMA"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from patient_registry.api.main import app  # noqa: E402
from patient_registry.db.models import Patient  # noqa: E402

API = "/api/pacientes"


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient over a fresh, empty database."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    """Client whose database holds the three sample patients (ids 1, 2, 3)."""
    for body in (
        {"name": "Pepe Argento", "age": 23, "email": "pepe@gmail.com"},
        {"name": "Juan Castro", "age": 44, "email": "juan@gmail.com"},
        {"name": "Felipe Melo", "age": 18, "email": "felipe@gmail.com"},
    ):
        assert client.post(API, json=body).status_code == 200
    return client


@pytest.fixture
def sample_patients() -> list[Patient]:
    """Detached ORM instances, for tests that mock out the service layer."""
    return [
        Patient(id=1, name="Pepe Argento", age=23, email="pepe@gmail.com"),
        Patient(id=2, name="Juan Castro", age=44, email="juan@gmail.com"),
        Patient(id=3, name="Felipe Melo", age=18, email="felipe@gmail.com"),
    ]
