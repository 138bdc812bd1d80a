"""Data models for RepublicNews."""

from republic_news.data.models import (
    Article,
    ConnectionClass,
    DeviceState,
    Empty,
    ErrorKind,
    ErrorResult,
    LoadingResult,
    NoConnection,
    Results,
    SearchResult,
)

__all__ = [
    "Article",
    "ConnectionClass",
    "DeviceState",
    "Empty",
    "ErrorKind",
    "ErrorResult",
    "LoadingResult",
    "NoConnection",
    "Results",
    "SearchResult",
]
