"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.config.settings import Settings


def make_settings(**overrides) -> Settings:
    """Test settings that ignore the developer's environment and .env file."""
    values = {"environment": "testing", "log_level": "DEBUG"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings fixture with production timings."""
    return make_settings()


@pytest.fixture
def fast_settings() -> Settings:
    """Settings with short heartbeat intervals for cadence tests."""
    return make_settings(sse_heartbeat_interval=0.05, ws_heartbeat_interval=0.05)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Fresh application per test."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI test client running the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fast_client(fast_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for an app with fast heartbeats."""
    with TestClient(create_app(fast_settings)) as test_client:
        yield test_client


@pytest.fixture
def missing_page(tmp_path: Path) -> Path:
    """Path to an HTML page that does not exist."""
    return tmp_path / "ws-test.html"
