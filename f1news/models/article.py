from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field


class MediaRef(BaseModel):
    url: str = Field(description="Media URL")
    type: str | None = Field(default=None, description="Declared MIME type")


class Article(BaseModel):
    """One feed entry, serialized with the feed-native field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(default="", description="Article headline")
    link: str = Field(default="", description="URL of the full article")
    pub_date: str | None = Field(
        default=None, alias="pubDate", description="Publication date as published"
    )
    iso_date: str | None = Field(
        default=None, alias="isoDate", description="Publication date in ISO-8601 UTC"
    )
    content_snippet: str = Field(
        default="", alias="contentSnippet", description="Plain text excerpt"
    )
    content: str | None = Field(default=None, description="Full content if provided")
    enclosure: MediaRef | None = None
    media_content: MediaRef | None = Field(default=None, alias="media:content")
    media_thumbnail: MediaRef | None = Field(default=None, alias="media:thumbnail")
    guid: str | None = None
    creator: str | None = None
    categories: list[str] = Field(default_factory=list)

    @property
    def published_at(self) -> datetime | None:
        return parse_datetime(self.pub_date) or parse_datetime(self.iso_date)


# RFC 822 zone names; dateutil leaves them naive otherwise.
RFC822_ZONES: dict[str, int] = {
    "UT": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = date_parser.parse(value, tzinfos=RFC822_ZONES)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, TypeError, OverflowError):
        return None
