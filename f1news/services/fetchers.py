from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from ..config import Settings, get_settings
from ..http_client import feed_headers, get_http_client
from .cache import FeedCache, get_feed_cache

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FetchResult:
    """Raw feed document for one source, or the reason there is none.

    Direct fetches keep the undecoded bytes so the XML parser can honour the
    encoding declared in the document prolog.
    """

    url: str
    body: bytes | str | None = None
    error: str | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.body is not None

    @classmethod
    def success(
        cls, url: str, body: bytes | str, from_cache: bool = False
    ) -> FetchResult:
        return cls(url=url, body=body, from_cache=from_cache)

    @classmethod
    def failure(cls, url: str, error: str) -> FetchResult:
        return cls(url=url, error=error)


class FeedFetcher(ABC):
    """Retrieves the raw feed document for one source URL.

    Implementations report every problem through ``FetchResult.failure`` and
    never raise for a single unreachable or broken source.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client

    async def _client(self) -> httpx.AsyncClient:
        return self.client or await get_http_client()

    def _failed(self, url: str, error: str) -> FetchResult:
        logger.warning("Failed to fetch %s: %s", url, error)
        return FetchResult.failure(url, error)

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        raise NotImplementedError


class DirectFetcher(FeedFetcher):
    """Requests the feed from its origin, caching successful bodies."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        cache: FeedCache | None = None,
    ) -> None:
        super().__init__(settings, client)
        self.cache = cache if cache is not None else get_feed_cache()

    async def fetch(self, url: str) -> FetchResult:
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Serving %s from cache", url)
            return FetchResult.success(url, cached, from_cache=True)

        client = await self._client()
        try:
            response = await client.get(
                url,
                headers=feed_headers(self.settings),
                timeout=self.settings.http_timeout,
            )
        except httpx.HTTPError as exc:
            return self._failed(url, f"{type(exc).__name__}: {exc}")

        if not response.is_success:
            return self._failed(url, f"HTTP {response.status_code}")
        body = response.content
        if not body.strip():
            return self._failed(url, "empty response")

        self.cache.put(url, body)
        return FetchResult.success(url, body)


class ProxiedFetcher(FeedFetcher):
    """Requests the feed through a relay that wraps it as ``{"contents": ...}``."""

    async def fetch(self, url: str) -> FetchResult:
        client = await self._client()
        try:
            response = await client.get(
                str(self.settings.relay_url),
                params={"url": url},
                headers={"User-Agent": self.settings.http_user_agent},
                timeout=self.settings.http_timeout,
            )
        except httpx.HTTPError as exc:
            return self._failed(url, f"{type(exc).__name__}: {exc}")

        if not response.is_success:
            return self._failed(url, f"HTTP {response.status_code}")
        try:
            payload = response.json()
        except ValueError:
            return self._failed(url, "non-JSON relay response")

        # The relay has already decoded the document into a JSON string.
        contents = payload.get("contents") if isinstance(payload, dict) else None
        if not isinstance(contents, str) or not contents.strip():
            return self._failed(url, "no contents")
        return FetchResult.success(url, contents)


def build_fetcher(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> FeedFetcher:
    settings = settings or get_settings()
    if settings.fetch_mode == "proxied":
        return ProxiedFetcher(settings=settings, client=client)
    return DirectFetcher(settings=settings, client=client)
