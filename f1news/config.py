import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", populate_by_name=True
    )

    http_timeout: float = Field(5.0, gt=0, alias="HTTP_TIMEOUT")
    http_max_connections: int = Field(10, ge=1, alias="HTTP_MAX_CONNECTIONS")
    http_max_keepalive: int = Field(5, ge=1, alias="HTTP_MAX_KEEPALIVE")
    http_user_agent: str = Field(
        "Mozilla/5.0 (compatible; F1NewsBot/1.0)",
        alias="HTTP_USER_AGENT",
    )

    fetch_mode: Literal["direct", "proxied"] = Field("direct", alias="FETCH_MODE")
    relay_url: HttpUrl = Field("https://api.allorigins.win/get", alias="RELAY_URL")
    feed_cache_ttl: float = Field(300.0, ge=0, alias="FEED_CACHE_TTL")

    log_level: str = Field("INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
