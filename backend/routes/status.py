"""Status page and readiness check routes."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from config import settings

router = APIRouter()

STATUS_PAGE = """
<h1>Google Sheets to TradingView Middleware</h1>
<p>Status: Running</p>
<p>Endpoints:</p>
<ul>
  <li><a href="/api/sheet-data">/api/sheet-data</a> - Get formatted data for TradingView</li>
  <li><a href="/api/refresh-cache">/api/refresh-cache</a> - Manually clear the cache</li>
</ul>
"""


@router.get("/", response_class=HTMLResponse)
async def status_page() -> str:
    return STATUS_PAGE


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {
        "status": "ok",
        "service": "sheets-chart-middleware",
        "commit": settings.git_sha,
        "credentials_configured": bool(settings.google_credentials),
    }
