"""Shared fixtures for RepublicNews tests."""

from __future__ import annotations

import pytest

from republic_news.data import Article


def make_articles(n: int) -> list[Article]:
    return [
        Article(
            title=f"Article {i}",
            description=f"Description {i}",
            link=f"https://example.com/{i}",
            authors=(f"Author {i}",),
            published_at=f"2026-02-01 10:{i:02d}:00",
        )
        for i in range(n)
    ]


def make_payload(n: int, status: str = "success") -> dict:
    """Sample newsdata.io ``latest`` response body."""
    return {
        "status": status,
        "totalResults": n,
        "results": [
            {
                "article_id": f"id-{i}",
                "title": f"Article {i}",
                "description": f"Description {i}",
                "link": f"https://example.com/{i}",
                "creator": [f"Author {i}"],
                "pubDate": f"2026-02-01 10:{i:02d}:00",
                "language": "spanish",
            }
            for i in range(n)
        ],
        "nextPage": None,
    }


@pytest.fixture
def ten_articles() -> list[Article]:
    return make_articles(10)
