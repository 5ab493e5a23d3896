"""Centralized configuration — all env vars in one place."""

import os

from dotenv import load_dotenv


def load_local_env() -> bool:
    """Load .env for local runs. Production gets its env from the function host."""
    if os.getenv("ENVIRONMENT", "local") == "production":
        return False
    load_dotenv()
    return True


load_local_env()

DEFAULT_SHEET_RANGE = "Sheet1!A:B"
DEFAULT_PORT = 3000


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(os.getenv("PORT") or DEFAULT_PORT)

        # Google Sheets
        self.google_credentials: str | None = os.getenv("GOOGLE_CREDENTIALS")
        self.sheet_id: str | None = os.getenv("SHEET_ID")
        self.sheet_range: str = os.getenv("SHEET_RANGE") or DEFAULT_SHEET_RANGE

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing env vars that force mock data."""
        required = ["GOOGLE_CREDENTIALS", "SHEET_ID"]
        return [var for var in required if not getattr(self, var.lower())]


settings = Settings()
