from __future__ import annotations

import logging

from fastapi import Depends, FastAPI
from fastapi.responses import ORJSONResponse
from mangum import Mangum

from f1news.config import configure_logging
from f1news.http_client import shutdown_http_client
from f1news.services import NewsService, NoArticlesError

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="F1 News Feed API",
    version="0.1.0",
    description="Formula 1 headlines merged from several RSS feeds, newest first.",
    default_response_class=ORJSONResponse,
)


def get_news_service() -> NewsService:
    return NewsService()


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/rss", tags=["news"])
async def rss_articles(service: NewsService = Depends(get_news_service)):
    try:
        articles = await service.fetch_articles()
    except NoArticlesError as exc:
        logger.warning("No RSS feed returned articles")
        return ORJSONResponse({"error": str(exc)}, status_code=503)
    except Exception:
        logger.exception("RSS API error")
        return ORJSONResponse({"error": "Failed to fetch RSS feeds"}, status_code=500)
    return {
        "articles": [
            article.model_dump(mode="json", by_alias=True, exclude_none=True)
            for article in articles
        ]
    }


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await shutdown_http_client()


handler = Mangum(app)
