"""newsdata.io client for the ``latest`` endpoint."""

from __future__ import annotations

import logging
import os

import httpx
from pydantic import BaseModel, Field, field_validator, model_validator

from republic_news.data import Article

NEWSDATA_API_URL = "https://newsdata.io/api/1"
NEWSDATA_API_KEY_ENV = "NEWSDATA_API_KEY"
SUCCESS_STATUS = "success"

logger = logging.getLogger(__name__)


class NewsDataArticle(BaseModel):
    """A single entry of the ``results`` array."""

    title: str | None = None
    description: str | None = None
    link: str | None = None
    creator: list[str] | None = None
    pub_date: str | None = Field(default=None, alias="pubDate")

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    @field_validator("creator", mode="before")
    @classmethod
    def drop_null_creators(cls, v: object) -> object:
        if isinstance(v, list):
            return [c for c in v if c is not None]
        return v

    def to_article(self) -> Article:
        return Article(
            title=self.title,
            description=self.description,
            link=self.link,
            authors=tuple(self.creator) if self.creator is not None else None,
            published_at=self.pub_date,
        )


class NewsDataResponse(BaseModel):
    """Top-level body returned by the ``latest`` endpoint."""

    status: str | None = None
    results: list[NewsDataArticle] | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def drop_error_details(cls, data: object) -> object:
        # Error bodies carry {"message": ..., "code": ...} under "results".
        if (
            isinstance(data, dict)
            and data.get("status") != SUCCESS_STATUS
            and not isinstance(data.get("results"), list)
        ):
            if data.get("results") is not None:
                logger.debug("newsdata.io error details: %s", data["results"])
            return {**data, "results": None}
        return data

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS and self.results is not None

    def articles(self) -> list[Article]:
        return [item.to_article() for item in self.results or []]


class NewsDataClient:
    """Fetch the latest news from the newsdata.io API.

    A fresh ``httpx.AsyncClient`` is opened per request. The transport
    enforces ``timeout``; a request never blocks past it.

    Args:
        api_key: newsdata.io API key (defaults to NEWSDATA_API_KEY env var).
        base_url: API root, without the endpoint path.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = NEWSDATA_API_URL,
        timeout: float = 30.0,
        api_key_env: str = NEWSDATA_API_KEY_ENV,
    ) -> None:
        self._api_key = api_key or os.environ.get(api_key_env)
        if not self._api_key:
            raise ValueError(
                f"newsdata.io API key required. Pass api_key or set {api_key_env} env var."
            )
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def latest(self, query: str) -> NewsDataResponse:
        """Fetch the latest articles matching ``query``.

        Args:
            query: Free-text query. An empty string is sent as-is.

        Returns:
            The decoded response. A non-success ``status`` is returned, not
            raised; callers decide what it means.

        Raises:
            httpx.HTTPError: On network failure, timeout or a non-2xx status.
            pydantic.ValidationError: If the body does not match the schema.
            ValueError: If the body is not JSON.
        """
        params = {"apikey": self._api_key, "q": query}
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(f"{self._base_url}/latest", params=params)
            response.raise_for_status()
            data = response.json()

        decoded = NewsDataResponse.model_validate(data)
        logger.debug(
            "newsdata.io returned status=%s with %d results",
            decoded.status,
            len(decoded.results or []),
        )
        return decoded
