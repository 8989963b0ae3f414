from __future__ import annotations

import time
from collections.abc import Callable
from functools import lru_cache

from ..config import get_settings


class FeedCache:
    """Raw feed documents keyed by source URL, valid for ``ttl`` seconds."""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, bytes | str]] = {}

    def get(self, url: str) -> bytes | str | None:
        entry = self._entries.get(url)
        if entry is None:
            return None
        expires_at, body = entry
        if self._clock() >= expires_at:
            del self._entries[url]
            return None
        return body

    def put(self, url: str, body: bytes | str) -> None:
        if self.ttl <= 0:
            return
        self._entries[url] = (self._clock() + self.ttl, body)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache
def get_feed_cache() -> FeedCache:
    return FeedCache(ttl=get_settings().feed_cache_ttl)
