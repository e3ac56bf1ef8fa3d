"""
Dependencies
============

FastAPI dependencies exposing the per-application service objects stored on
``app.state`` by ``create_app()``.
"""

from starlette.requests import HTTPConnection

from src.api.health import HealthReporter
from src.api.lifecycle import LifecycleController
from src.api.ws.registry import ConnectionRegistry
from src.config.settings import Settings


def get_app_settings(connection: HTTPConnection) -> Settings:
    return connection.app.state.settings


def get_registry(connection: HTTPConnection) -> ConnectionRegistry:
    return connection.app.state.registry


def get_health_reporter(connection: HTTPConnection) -> HealthReporter:
    return connection.app.state.health


def get_lifecycle(connection: HTTPConnection) -> LifecycleController:
    return connection.app.state.lifecycle
