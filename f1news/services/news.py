from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..config import Settings, get_settings
from ..models.article import Article
from .aggregator import SourceResult, aggregate_articles
from .fetchers import FeedFetcher, build_fetcher
from .parser import FeedParseError, parse_feed

logger = logging.getLogger(__name__)

FEED_URLS: tuple[str, ...] = (
    "https://www.formula1.com/rss/news/headlines.rss",
    "https://www.motorsport.com/rss/f1/news/",
)


@dataclass(slots=True)
class NewsService:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None
    fetcher: FeedFetcher | None = None

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()
        if self.fetcher is None:
            self.fetcher = build_fetcher(self.settings, self.client)

    async def fetch_articles(self) -> list[Article]:
        # Sources are fetched one at a time, in list order.
        results = [await self._fetch_source(url) for url in FEED_URLS]
        failed = sum(1 for result in results if not result.ok)
        articles = aggregate_articles(results)
        logger.info(
            "Aggregated %d articles from %d/%d feeds",
            len(articles),
            len(results) - failed,
            len(results),
        )
        return articles

    async def _fetch_source(self, url: str) -> SourceResult:
        fetched = await self.fetcher.fetch(url)
        if not fetched.ok:
            return SourceResult.failure(url, fetched.error or "unknown error")
        try:
            articles = parse_feed(fetched.body)
        except FeedParseError as exc:
            logger.warning("Failed to parse %s: %s", url, exc)
            return SourceResult.failure(url, str(exc))
        except Exception as exc:
            # One broken entry drops its source, never the whole batch.
            logger.warning("Failed to read entries from %s", url, exc_info=True)
            return SourceResult.failure(url, f"{type(exc).__name__}: {exc}")
        return SourceResult.success(url, articles)
