"""
FastAPI Application
==================

Application factory for the mock SSE & WebSocket service.
Routers are registered in dispatch order; the SSE catch-all comes last.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from src.api.errors import StaticPageError, static_page_exception_handler
from src.api.health import HealthReporter
from src.api.lifecycle import LifecycleController
from src.api.routes import cors, health, pages, sse, ws
from src.api.server import run_server
from src.api.ws.registry import ConnectionRegistry
from src.config.logging import get_logger
from src.config.settings import Settings, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    base = f"http://localhost:{settings.port}"

    logger.info(
        f"{settings.app_name} started",
        http=f"http://{settings.host}:{settings.port}",
        health_check=f"{base}/health",
        sse_test=f"{base}/any/path",
        websocket_test_page=f"{base}/ws-test",
        websocket_api=f"ws://localhost:{settings.port}/ws",
    )

    try:
        yield
    finally:
        # No-op when a signal already ran the shutdown sequence
        try:
            await app.state.lifecycle.shutdown("lifespan")
        except Exception as e:
            logger.error("Error during shutdown", error=str(e))
        logger.info(f"{settings.app_name} stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function for creating FastAPI app instances.

    Each app owns its own connection registry, health reporter and lifecycle
    controller, stored on ``app.state``.

    Args:
        settings: Settings to use instead of the environment-derived ones

    Returns:
        FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Mock Server-Sent Events and WebSocket endpoints for client testing",
        version=settings.app_version,
        lifespan=lifespan,
        # Every unclaimed path is an SSE stream, including these
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    registry = ConnectionRegistry()
    app.state.settings = settings
    app.state.registry = registry
    app.state.health = HealthReporter(registry, settings.app_version)
    app.state.lifecycle = LifecycleController(registry)

    app.add_exception_handler(StaticPageError, static_page_exception_handler)  # type: ignore[arg-type]

    app.include_router(cors.router)
    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(ws.router)
    app.include_router(sse.router)

    return app


app = create_app()


def main() -> None:
    """Run the service with settings from the environment."""
    settings = get_settings()
    run_server(app, settings.host, settings.port, settings.shutdown_timeout)


if __name__ == "__main__":
    main()
