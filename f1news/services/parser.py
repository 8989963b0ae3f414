from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from ..models.article import Article, MediaRef, parse_datetime

FEED_ROOTS = ["rss", "feed", "RDF"]

# Unprefixed elements, or Atom and RSS 1.0 ones bound to an explicit prefix.
CORE_NAMESPACES = {"http://www.w3.org/2005/Atom", "http://purl.org/rss/1.0/"}


class FeedParseError(ValueError):
    """Raised when a document is not an RSS or Atom feed."""


def parse_feed(document: str | bytes) -> list[Article]:
    """Parse RSS 2.0, RSS 1.0 or Atom into articles, in document order.

    Bytes are handed to the XML parser undecoded so that the encoding in the
    ``<?xml ... ?>`` prolog is honoured.
    """
    if not document or not document.strip():
        raise FeedParseError("feed document is empty")
    soup = BeautifulSoup(document, "xml")
    root = soup.find(FEED_ROOTS)
    if root is None:
        raise FeedParseError("no rss, rdf or atom root element found")
    entries = (tag for tag in root.find_all(["item", "entry"]) if _is_core(tag))
    return [_parse_entry(entry) for entry in entries]


def _parse_entry(entry: Any) -> Article:
    description = _text(_child(entry, "description")) or _text(_child(entry, "summary"))
    content = (
        _text(entry.find("content:encoded", recursive=False))
        or _text(_child(entry, "content"))
        or description
    )
    pub_date = (
        _text(_child(entry, "pubDate"))
        or _text(_child(entry, "published"))
        or _text(_child(entry, "updated"))
    )
    published = parse_datetime(pub_date) or parse_datetime(
        _text(entry.find("dc:date", recursive=False))
    )

    return Article(
        title=_strip_html(_text(_child(entry, "title"))),
        link=_link(entry),
        pub_date=pub_date,
        iso_date=published.isoformat().replace("+00:00", "Z") if published else None,
        content_snippet=_strip_html(description or content),
        content=content,
        enclosure=_enclosure(entry),
        media_content=_media(entry, "media:content"),
        media_thumbnail=_media(entry, "media:thumbnail"),
        guid=_text(_child(entry, "guid")) or _text(_child(entry, "id")),
        creator=_creator(entry),
        categories=_categories(entry),
    )


def _text(tag: Any) -> str | None:
    if tag is None:
        return None
    value = tag.get_text(strip=True)
    return value or None


def _children(entry: Any, name: str, **attrs: Any) -> list[Any]:
    # Core elements share local names with extensions (media:title, media:content).
    return [
        tag
        for tag in entry.find_all(name, recursive=False, **attrs)
        if _is_core(tag)
    ]


def _is_core(tag: Any) -> bool:
    return not tag.prefix or tag.namespace in CORE_NAMESPACES


def _child(entry: Any, name: str) -> Any:
    children = _children(entry, name)
    return children[0] if children else None


def _strip_html(value: str | None) -> str:
    if not value:
        return ""
    if "<" not in value and "&" not in value:
        return value.strip()
    return BeautifulSoup(value, "lxml").get_text(" ", strip=True)


def _link(entry: Any) -> str:
    for tag in _children(entry, "link"):
        href = tag.get("href")
        if href is None:
            text = tag.get_text(strip=True)
            if text:
                return text
            continue
        if tag.get("rel", "alternate") == "alternate":
            return href
    return ""


def _enclosure(entry: Any) -> MediaRef | None:
    tag = _child(entry, "enclosure")
    if tag is not None and tag.get("url"):
        return MediaRef(url=tag["url"], type=tag.get("type"))
    for link in _children(entry, "link", rel="enclosure"):
        if link.get("href"):
            return MediaRef(url=link["href"], type=link.get("type"))
    return None


def _media(entry: Any, name: str) -> MediaRef | None:
    # media:group may wrap the extension elements, so search the whole entry.
    for tag in entry.find_all(name):
        if tag.get("url"):
            return MediaRef(url=tag["url"], type=tag.get("type"))
    return None


def _creator(entry: Any) -> str | None:
    creator = _text(entry.find("dc:creator", recursive=False))
    if creator:
        return creator
    author = _child(entry, "author")
    if author is None:
        return None
    name = _child(author, "name")
    return _text(name) if name is not None else _text(author)


def _categories(entry: Any) -> list[str]:
    categories: list[str] = []
    for tag in _children(entry, "category"):
        value = tag.get("term") or tag.get_text(strip=True)
        if value:
            categories.append(value)
    return categories
