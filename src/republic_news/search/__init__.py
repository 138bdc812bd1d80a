"""News provider clients."""

from republic_news.search.base import NewsClient
from republic_news.search.newsdata import (
    NEWSDATA_API_KEY_ENV,
    NEWSDATA_API_URL,
    SUCCESS_STATUS,
    NewsDataArticle,
    NewsDataClient,
    NewsDataResponse,
)

__all__ = [
    "NEWSDATA_API_KEY_ENV",
    "NEWSDATA_API_URL",
    "SUCCESS_STATUS",
    "NewsClient",
    "NewsDataArticle",
    "NewsDataClient",
    "NewsDataResponse",
]
