"""Core data models for RepublicNews."""

from dataclasses import dataclass
from enum import StrEnum


class ConnectionClass(StrEnum):
    """Classification of the active network connection."""

    WIFI = "wifi"
    CELLULAR = "cellular"
    UNKNOWN = "unknown"
    NONE = "none"

    @property
    def label(self) -> str:
        """User-visible label shown on the news screen."""
        return _CONNECTION_LABELS[self]


_CONNECTION_LABELS = {
    ConnectionClass.WIFI: "Wi-Fi",
    ConnectionClass.CELLULAR: "Datos móviles",
    ConnectionClass.UNKNOWN: "Desconocida",
    ConnectionClass.NONE: "Sin conexión",
}


class ErrorKind(StrEnum):
    """Kinds of failure a search attempt can end in."""

    NO_CONNECTIVITY = "no_connectivity"
    APPLICATION = "application"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class Article:
    """A news item returned by the news provider.

    Every field is optional; the renderer substitutes placeholders for
    missing values.
    """

    title: str | None = None
    description: str | None = None
    link: str | None = None
    authors: tuple[str, ...] | None = None
    published_at: str | None = None

    @property
    def first_author(self) -> str | None:
        if not self.authors:
            return None
        return self.authors[0]


@dataclass(frozen=True)
class DeviceState:
    """Snapshot of connectivity and battery at a point in time."""

    connection: ConnectionClass
    battery_percent: int = 100

    @property
    def is_connected(self) -> bool:
        return self.connection is not ConnectionClass.NONE


# ============================================================
# Display results
# ============================================================


@dataclass(frozen=True)
class Results:
    """A non-empty list of articles to render."""

    articles: tuple[Article, ...]


@dataclass(frozen=True)
class Empty:
    """Nothing to show yet, or the search returned no articles."""


@dataclass(frozen=True)
class ErrorResult:
    """A failed search with a user-visible message."""

    message: str


@dataclass(frozen=True)
class LoadingResult:
    """A request is in flight."""


@dataclass(frozen=True)
class NoConnection:
    """The device had no network when the search was attempted."""

    message: str


SearchResult = Results | Empty | ErrorResult | LoadingResult | NoConnection
