"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Google credentials are missing or unusable. Never reaches the caller."""


class SheetDataError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def to_payload(self) -> dict:
        payload = {"error": str(self)}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class UpstreamFetchError(SheetDataError):
    def __init__(self, reason: str):
        super().__init__(
            "Failed to fetch data from Google Sheets",
            status_code=500,
            details=reason,
        )


class EmptyDataError(SheetDataError):
    def __init__(self):
        super().__init__("No data found in spreadsheet", status_code=404)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(SheetDataError)
    async def handle_sheet_data_error(_request: Request, exc: SheetDataError):
        return JSONResponse(exc.to_payload(), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
