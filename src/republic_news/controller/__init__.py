"""Search request controller and its states."""

from republic_news.controller.controller import DEFAULT_QUERY, SearchController, StateListener
from republic_news.controller.state import (
    NO_CONNECTION,
    NO_CONNECTION_MESSAGE,
    Failed,
    Idle,
    Loading,
    SearchState,
    Success,
    application_error,
    to_search_result,
    transport_error,
)

__all__ = [
    "DEFAULT_QUERY",
    "NO_CONNECTION",
    "NO_CONNECTION_MESSAGE",
    "Failed",
    "Idle",
    "Loading",
    "SearchController",
    "SearchState",
    "StateListener",
    "Success",
    "application_error",
    "to_search_result",
    "transport_error",
]
