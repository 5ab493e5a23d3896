"""Sheet data routes — Google Sheets rows reshaped for the charting client.

GET /api/sheet-data     → cached series, or a fresh fetch on a miss
GET /api/refresh-cache  → drop the cached series
"""

import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from config import settings
from dependencies import CacheDep, ClientFactory, ClientFactoryDep
from errors import EmptyDataError
from services.formatter import MOCK_SERIES, format_rows
from services.sheets_client import Unavailable

logger = logging.getLogger(__name__)

router = APIRouter()

SHEET_DATA_KEY = "sheetData"
SHEET_DATA_TTL_SECONDS = 300


def _series_response(payload: dict) -> JSONResponse:
    return JSONResponse(payload, headers={"Access-Control-Allow-Origin": "*"})


def _fetch_rows(client_factory: ClientFactory) -> list[list[str]] | Unavailable:
    """Build the client and read the configured range. Blocking; run it in a thread."""
    result = client_factory()
    if isinstance(result, Unavailable):
        return result

    logger.info("Attempting to fetch data for Sheet ID: %s", settings.sheet_id)
    return result.client.fetch_range(settings.sheet_id, settings.sheet_range)


@router.get("/api/sheet-data")
async def sheet_data(cache: CacheDep, client_factory: ClientFactoryDep) -> JSONResponse:
    """Formatted series for the charting client, cached for five minutes."""
    cached = cache.get(SHEET_DATA_KEY)
    if cached is not None:
        logger.info("Returning cached data")
        return _series_response(cached)

    logger.info("Fetching fresh data from Google Sheets")
    rows = await asyncio.to_thread(_fetch_rows, client_factory)
    if isinstance(rows, Unavailable):
        # Mock data is never cached; the next request rebuilds the client
        logger.warning("Sheets client unavailable, serving mock data: %s", rows.reason)
        return _series_response(MOCK_SERIES.to_dict())

    if not rows:
        logger.warning("Sheet %s returned no rows", settings.sheet_id)
        raise EmptyDataError()

    payload = format_rows(rows).to_dict()
    cache.set(SHEET_DATA_KEY, payload, ttl_seconds=SHEET_DATA_TTL_SECONDS)
    return _series_response(payload)


@router.get("/api/refresh-cache")
async def refresh_cache(cache: CacheDep) -> dict:
    """Drop the cached series. Safe to call when nothing is cached."""
    cache.delete(SHEET_DATA_KEY)
    logger.info("Sheet data cache cleared")
    return {"status": "Cache cleared"}
