"""FastAPI application entry point for the sheets chart middleware."""

import logging
import sys

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from errors import register_error_handlers
from services.cache import TTLCache

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(sheet_cache: TTLCache | None = None) -> FastAPI:
    app = FastAPI(title="Sheets Chart Middleware", version="1.0.0")

    # One cache per app, shared by every request it serves
    app.state.sheet_cache = sheet_cache if sheet_cache is not None else TTLCache(default_ttl_seconds=300)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.sheet_data import router as sheet_data_router
    from routes.status import router as status_router

    app.include_router(status_router)
    app.include_router(sheet_data_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (serving mock data): %s", ", ".join(missing))

    return app


app = create_app()


def main() -> None:
    """Serve locally with uvicorn. Production runs through function_app.py."""
    if settings.is_production:
        logger.error("ENVIRONMENT=production: the app is served by the function host, not a local listener")
        raise SystemExit(1)

    import uvicorn

    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
