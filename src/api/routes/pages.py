"""
Page Routes
===========

Serves the bundled WebSocket test page.
"""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_app_settings
from src.api.errors import StaticPageError
from src.api.routes import ROUTED_METHODS, AnyMethodRoute
from src.config.settings import Settings

router = APIRouter(tags=["Pages"], route_class=AnyMethodRoute)


async def load_page(page_path: Path) -> str:
    """Read an HTML page without blocking the event loop."""
    try:
        return await run_in_threadpool(page_path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StaticPageError(page_path.name, reason=str(e)) from e


@router.api_route("/ws-test", methods=ROUTED_METHODS, response_class=HTMLResponse)
async def ws_test_page(settings: Settings = Depends(get_app_settings)) -> HTMLResponse:
    """Browser page for trying the WebSocket endpoint by hand."""
    html = await load_page(settings.ws_test_page)
    return HTMLResponse(
        content=html,
        headers={"Cache-Control": "no-cache"},
        media_type="text/html; charset=utf-8",
    )
