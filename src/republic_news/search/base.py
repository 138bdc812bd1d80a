from typing import Protocol

from republic_news.search.newsdata import NewsDataResponse


class NewsClient(Protocol):
    """Interface for fetching the latest headlines for a query."""

    async def latest(self, query: str) -> NewsDataResponse:
        """Fetch the latest articles matching ``query``.

        Args:
            query: Free-text search query. An empty string is sent as-is.

        Returns:
            The decoded provider response.

        Raises:
            Exception: Any transport or decoding failure.
        """
        ...
