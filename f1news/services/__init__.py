from .aggregator import NoArticlesError, aggregate_articles, extract_image_url
from .news import FEED_URLS, NewsService

__all__ = [
    "FEED_URLS",
    "NewsService",
    "NoArticlesError",
    "aggregate_articles",
    "extract_image_url",
]
