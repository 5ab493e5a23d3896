"""Simple in-memory TTL cache. No Redis needed.

One instance is created per app by create_app() and shared by every request
that app serves. Each uvicorn worker (or function host) has its own instance,
so data may be fetched once per worker.
"""

import time
from typing import Any, Callable


class TTLCache:
    def __init__(self, default_ttl_seconds: float = 60, clock: Callable[[], float] = time.time):
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        if key in self._store:
            expires_at, value = self._store[key]
            if self._clock() < expires_at:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        if ttl_seconds is None:
            ttl_seconds = self.default_ttl_seconds
        self._store[key] = (self._clock() + ttl_seconds, value)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
