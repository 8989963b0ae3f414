import asyncio

import httpx

from .config import Settings, get_settings

FEED_ACCEPT = "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8"

_client: httpx.AsyncClient | None = None
_client_lock = asyncio.Lock()


def feed_headers(settings: Settings) -> dict[str, str]:
    """Headers every feed request carries: who we are and what we read."""
    return {"User-Agent": settings.http_user_agent, "Accept": FEED_ACCEPT}


def build_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        limits=httpx.Limits(
            max_connections=settings.http_max_connections,
            max_keepalive_connections=settings.http_max_keepalive,
        ),
        headers=feed_headers(settings),
        # Feed hosts commonly redirect http to https and bare to www.
        follow_redirects=True,
    )


async def get_http_client() -> httpx.AsyncClient:
    global _client

    if _client is None:
        async with _client_lock:
            if _client is None:
                _client = build_http_client()
    return _client


async def shutdown_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
