"""States of the search request controller."""

from dataclasses import dataclass

from republic_news.data import (
    Article,
    Empty,
    ErrorKind,
    ErrorResult,
    LoadingResult,
    NoConnection,
    Results,
    SearchResult,
)

NO_CONNECTION_MESSAGE = "No hay conexión a internet."


@dataclass(frozen=True)
class Idle:
    """No search has been attempted yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Success:
    """The provider answered; ``articles`` is already truncated."""

    articles: tuple[Article, ...]


@dataclass(frozen=True)
class Failed:
    """The attempt ended in an error of the given kind."""

    kind: ErrorKind
    message: str


SearchState = Idle | Loading | Success | Failed


def application_error(status: str | None) -> Failed:
    return Failed(ErrorKind.APPLICATION, f"Error al obtener noticias (status={status})")


def transport_error(description: str) -> Failed:
    return Failed(ErrorKind.TRANSPORT, f"Error al obtener noticias: {description}")


NO_CONNECTION = Failed(ErrorKind.NO_CONNECTIVITY, NO_CONNECTION_MESSAGE)


def to_search_result(state: SearchState) -> SearchResult:
    """Map a controller state to the single result the screen displays."""
    if isinstance(state, Loading):
        return LoadingResult()
    if isinstance(state, Failed):
        if state.kind is ErrorKind.NO_CONNECTIVITY:
            return NoConnection(state.message)
        return ErrorResult(state.message)
    if isinstance(state, Success) and state.articles:
        return Results(state.articles)
    return Empty()
