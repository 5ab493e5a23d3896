"""FastAPI dependencies for the sheet-data routes.

The cache lives on app.state (created by create_app). The Sheets client is
only built on a cache miss, so routes get a factory rather than a client.
Tests swap either one through app.dependency_overrides.
"""

from typing import Annotated, Callable

from fastapi import Depends, Request

from config import settings
from services.cache import TTLCache
from services.sheets_client import ClientResult, initialize_client

ClientFactory = Callable[[], ClientResult]


def get_sheet_cache(request: Request) -> TTLCache:
    cache = getattr(request.app.state, "sheet_cache", None)
    if cache is None:
        raise RuntimeError("Sheet cache not initialized. Check create_app().")
    return cache


def get_client_factory() -> ClientFactory:
    return lambda: initialize_client(settings.google_credentials)


CacheDep = Annotated[TTLCache, Depends(get_sheet_cache)]
ClientFactoryDep = Annotated[ClientFactory, Depends(get_client_factory)]
