"""
Google Sheets v4 read-only client

Auth:
    Service-account JSON blob from GOOGLE_CREDENTIALS
    Scope: https://www.googleapis.com/auth/spreadsheets.readonly

A client that can't be built is reported as Unavailable(reason) instead of
raising, so the route can fall back to mock data.
"""

import json
import logging
from dataclasses import dataclass

from google.oauth2 import service_account
from googleapiclient.discovery import build

from errors import ConfigError, UpstreamFetchError

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


class SheetsClient:
    def __init__(self, service):
        self._service = service

    @classmethod
    def from_credentials_json(cls, credentials_json: str | None) -> "SheetsClient":
        """Build a client from a service-account JSON blob.

        Raises ConfigError when the blob is absent, not JSON, or not a
        service-account key.
        """
        if not credentials_json:
            raise ConfigError("GOOGLE_CREDENTIALS is not set")
        try:
            info = json.loads(credentials_json)
            if not isinstance(info, dict):
                raise ConfigError("GOOGLE_CREDENTIALS must be a JSON object")
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=SHEETS_SCOPES
            )
        except (ValueError, TypeError, KeyError) as e:
            raise ConfigError(f"Invalid GOOGLE_CREDENTIALS: {e}") from e

        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(service)

    def fetch_range(self, sheet_id: str | None, range_: str) -> list[list[str]]:
        """Read a range and return its rows; a sheet with no values gives []."""
        logger.info("Fetching range %s from sheet %s", range_, sheet_id)
        try:
            response = (
                self._service.spreadsheets()
                .values()
                .get(spreadsheetId=sheet_id, range=range_)
                .execute()
            )
        except Exception as e:
            logger.exception("Google Sheets API error for %s: %s", sheet_id, e)
            raise UpstreamFetchError(str(e)) from e

        return response.get("values", [])


@dataclass(frozen=True)
class Available:
    client: SheetsClient


@dataclass(frozen=True)
class Unavailable:
    reason: str


ClientResult = Available | Unavailable


def initialize_client(credentials_json: str | None) -> ClientResult:
    try:
        return Available(SheetsClient.from_credentials_json(credentials_json))
    except ConfigError as e:
        logger.error("Failed to initialize Google Sheets API: %s", e)
        return Unavailable(str(e))
