"""Shared fixtures: a fresh application (and so a fresh store) per test."""

import pytest
from fastapi.testclient import TestClient

from car_hire_api.app.core.store import CarStore, create_store
from car_hire_api.app.main import create_app
from car_hire_api.app.services.car_service import CarHireService


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def app_store(app) -> CarStore:
    """The store owned by ``app``."""
    return app.state.car_store


@pytest.fixture
def store() -> CarStore:
    return create_store()


@pytest.fixture
def service(store) -> CarHireService:
    return CarHireService(store)
