from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..models.article import Article

UNDATED = datetime.min.replace(tzinfo=timezone.utc)


class NoArticlesError(LookupError):
    """Every source failed or produced no entries."""

    def __init__(self, message: str = "No articles could be fetched from any RSS feeds") -> None:
        super().__init__(message)


@dataclass(slots=True)
class SourceResult:
    url: str
    articles: list[Article] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, articles: list[Article]) -> SourceResult:
        return cls(url=url, articles=articles)

    @classmethod
    def failure(cls, url: str, error: str) -> SourceResult:
        return cls(url=url, error=error)


def sort_key(article: Article) -> datetime:
    return article.published_at or UNDATED


def aggregate_articles(results: Iterable[SourceResult]) -> list[Article]:
    """Merge successful sources into one list, newest first.

    Articles are concatenated in source order without deduplication and then
    sorted stably, so equal timestamps keep their relative order. Raises
    ``NoArticlesError`` instead of returning an empty list.
    """
    merged: list[Article] = []
    for result in results:
        if result.ok:
            merged.extend(result.articles)
    if not merged:
        raise NoArticlesError()
    merged.sort(key=sort_key, reverse=True)
    return merged


def extract_image_url(article: Article) -> str | None:
    enclosure = article.enclosure
    if enclosure and enclosure.url and (enclosure.type or "").startswith("image/"):
        return enclosure.url
    media = article.media_content
    if media and media.url and (media.type or "").startswith("image/"):
        return media.url
    thumbnail = article.media_thumbnail
    if thumbnail and thumbnail.url:
        return thumbnail.url
    return None
