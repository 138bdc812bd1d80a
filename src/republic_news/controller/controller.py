"""Search request controller: one request at a time, adaptive result size."""

import asyncio
import logging
import time
from collections.abc import Callable

from republic_news.controller.state import (
    NO_CONNECTION,
    Failed,
    Idle,
    Loading,
    SearchState,
    Success,
    application_error,
    transport_error,
)
from republic_news.data import DeviceState
from republic_news.device import DeviceProbe
from republic_news.policy import DEFAULT_POLICY, TruncationPolicy, truncate_articles
from republic_news.search.base import NewsClient
from republic_news.search_logger import SearchLogger

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "Colombia"

StateListener = Callable[[SearchState], None]


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class SearchController:
    """State machine driving the news screen.

    States move ``Idle -> Loading -> Success | Failed``. The whole state is
    replaced on every transition, and listeners are notified synchronously,
    so a UI can re-render from ``state`` alone.

    At most one request is in flight: the in-flight flag is set before the
    first suspension point, and ``submit`` rejects calls while it is set.
    Requests are never cancelled by the controller.

    Args:
        probe: Samples connectivity and battery before each request.
        client: News provider client.
        policy: Truncation caps.
        default_query: Query issued on mount.
        search_logger: Optional SearchLogger recording each attempt.
    """

    def __init__(
        self,
        probe: DeviceProbe,
        client: NewsClient,
        *,
        policy: TruncationPolicy = DEFAULT_POLICY,
        default_query: str = DEFAULT_QUERY,
        search_logger: SearchLogger | None = None,
    ) -> None:
        self._probe = probe
        self._client = client
        self._policy = policy
        self._default_query = default_query
        self._search_logger = search_logger
        self._state: SearchState = Idle()
        self._device_state: DeviceState | None = None
        self._in_flight = False
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchState:
        """Current state of the screen."""
        return self._state

    @property
    def device_state(self) -> DeviceState | None:
        """Device state sampled for the latest attempt, or None before mount."""
        return self._device_state

    @property
    def in_flight(self) -> bool:
        """Whether a request is outstanding."""
        return self._in_flight

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a callback for state transitions.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def mount(self) -> None:
        """Load the initial headlines for the default query."""
        if self._in_flight:
            logger.debug("Mount ignored: a request is already in flight")
            return
        await self._search(self._default_query, trigger="mount")

    async def submit(self, query: str) -> bool:
        """Search for ``query`` on user request.

        Args:
            query: Query text; an empty string is sent as-is.

        Returns:
            False if rejected because a request was already in flight,
            True otherwise (whatever the outcome).
        """
        if self._in_flight:
            logger.debug("Search for %r rejected: a request is already in flight", query)
            return False
        await self._search(query, trigger="submit")
        return True

    async def _search(self, query: str, *, trigger: str) -> None:
        device = self._probe.sample()
        self._device_state = device

        if not device.is_connected:
            logger.info("No connectivity, skipping search for %r", query)
            self._transition(NO_CONNECTION)
            return

        self._in_flight = True
        t0 = time.monotonic()
        try:
            self._transition(Loading())
            if self._search_logger:
                self._search_logger.start_search(trigger, query, device)
            self._transition(await self._fetch(query, device))
        except asyncio.CancelledError:
            self._transition(transport_error("solicitud cancelada"))
            raise
        finally:
            self._in_flight = False
            if isinstance(self._state, Loading):
                self._transition(transport_error("solicitud interrumpida"))
            self._log_outcome(time.monotonic() - t0)

    async def _fetch(self, query: str, device: DeviceState) -> SearchState:
        """Issue the request and apply the completion rule."""
        try:
            response = await self._client.latest(query)
            if not response.is_success:
                logger.warning("News provider answered with status=%s", response.status)
                return application_error(response.status)
            articles = truncate_articles(
                device.battery_percent,
                device.connection,
                response.articles(),
                self._policy,
            )
        except Exception as e:
            description = _describe(e)
            logger.error("Error fetching news: %s", description)
            return transport_error(description)

        logger.info(
            "Showing %d articles for %r (connection=%s, battery=%d%%)",
            len(articles),
            query,
            device.connection,
            device.battery_percent,
        )
        return Success(tuple(articles))

    def _transition(self, state: SearchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _log_outcome(self, duration: float) -> None:
        if not self._search_logger:
            return
        state = self._state
        try:
            self._search_logger.finish_search(
                type(state).__name__,
                message=state.message if isinstance(state, Failed) else None,
                article_count=len(state.articles) if isinstance(state, Success) else 0,
                duration_seconds=duration,
            )
        except OSError as e:
            logger.warning("Could not write search log. Error: %s", e)
