"""Tests for SearchController."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from conftest import make_payload

from republic_news.controller import (
    NO_CONNECTION_MESSAGE,
    Failed,
    Idle,
    Loading,
    SearchController,
    SearchState,
    Success,
)
from republic_news.data import ConnectionClass, DeviceState, ErrorKind
from republic_news.device import DeviceProbe, StaticBatterySource, StaticNetworkSource, Transport
from republic_news.search import NewsDataResponse
from republic_news.search_logger import SearchLogger


def _probe(transports: set[Transport] | None, battery: int | None = 100) -> DeviceProbe:
    return DeviceProbe(
        network=StaticNetworkSource(frozenset(transports) if transports is not None else None),
        battery=StaticBatterySource(battery),
    )


def _response(n: int, status: str = "success") -> NewsDataResponse:
    return NewsDataResponse.model_validate(make_payload(n, status))


@pytest.fixture
def client() -> MagicMock:
    """Mock news client returning ten articles."""
    client = MagicMock()
    client.latest = AsyncMock(return_value=_response(10))
    return client


class TestMount:
    async def test_initial_state_is_idle(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}), client)
        assert controller.state == Idle()
        assert controller.device_state is None
        assert not controller.in_flight

    async def test_mount_requests_default_query(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.mount()

        client.latest.assert_awaited_once_with("Colombia")
        assert isinstance(controller.state, Success)
        assert len(controller.state.articles) == 10

    async def test_mount_uses_configured_query(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}), client, default_query="Bogotá")
        await controller.mount()
        client.latest.assert_awaited_once_with("Bogotá")

    async def test_mount_without_connection(self, client: MagicMock) -> None:
        controller = SearchController(_probe(None), client)
        await controller.mount()

        client.latest.assert_not_called()
        assert controller.state == Failed(ErrorKind.NO_CONNECTIVITY, NO_CONNECTION_MESSAGE)
        assert controller.device_state == DeviceState(ConnectionClass.NONE, 100)

    async def test_mount_applies_truncation(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.CELLULAR}, battery=80), client)
        await controller.mount()
        assert isinstance(controller.state, Success)
        assert len(controller.state.articles) == 5


class TestSubmit:
    async def test_low_battery_on_wifi(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}, battery=15), client)
        assert await controller.submit("deportes")

        client.latest.assert_awaited_once_with("deportes")
        assert isinstance(controller.state, Success)
        titles = [a.title for a in controller.state.articles]
        assert titles == ["Article 0", "Article 1", "Article 2"]

    async def test_cellular(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.CELLULAR}, battery=80), client)
        await controller.submit("q")
        assert isinstance(controller.state, Success)
        assert len(controller.state.articles) == 5

    async def test_short_result_not_padded(self, client: MagicMock) -> None:
        client.latest.return_value = _response(2)
        controller = SearchController(_probe({Transport.WIFI}, battery=80), client)
        await controller.submit("q")
        assert isinstance(controller.state, Success)
        assert len(controller.state.articles) == 2

    async def test_empty_results_is_success(self, client: MagicMock) -> None:
        client.latest.return_value = _response(0)
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.submit("q")
        assert controller.state == Success(())

    async def test_empty_query_is_sent_as_is(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.submit("")
        client.latest.assert_awaited_once_with("")

    async def test_no_connection_clears_results(self, client: MagicMock) -> None:
        network = MagicMock()
        network.active_transports.side_effect = [frozenset({Transport.WIFI}), None]
        controller = SearchController(
            DeviceProbe(network=network, battery=StaticBatterySource(90)), client
        )

        await controller.mount()
        assert isinstance(controller.state, Success)

        assert await controller.submit("q")
        assert controller.state == Failed(ErrorKind.NO_CONNECTIVITY, "No hay conexión a internet.")
        assert client.latest.await_count == 1

    async def test_resamples_device_before_each_search(self, client: MagicMock) -> None:
        battery = MagicMock()
        battery.read_level.side_effect = [(90, 100), (10, 100)]
        controller = SearchController(
            DeviceProbe(network=StaticNetworkSource(frozenset({Transport.WIFI})), battery=battery),
            client,
        )

        await controller.mount()
        assert len(controller.state.articles) == 10  # type: ignore[union-attr]

        await controller.submit("q")
        assert controller.device_state == DeviceState(ConnectionClass.WIFI, 10)
        assert len(controller.state.articles) == 3  # type: ignore[union-attr]

    async def test_error_status(self, client: MagicMock) -> None:
        client.latest.return_value = NewsDataResponse(status="error")
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.submit("q")

        assert controller.state == Failed(
            ErrorKind.APPLICATION, "Error al obtener noticias (status=error)"
        )
        assert not controller.in_flight

    async def test_missing_results_with_success_status(self, client: MagicMock) -> None:
        client.latest.return_value = NewsDataResponse(status="success", results=None)
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.submit("q")

        assert controller.state == Failed(
            ErrorKind.APPLICATION, "Error al obtener noticias (status=success)"
        )

    async def test_transport_error(
        self, client: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        client.latest.side_effect = httpx.ConnectError("connection refused")
        controller = SearchController(_probe({Transport.WIFI}), client)

        with caplog.at_level("ERROR"):
            await controller.submit("q")

        assert controller.state == Failed(
            ErrorKind.TRANSPORT, "Error al obtener noticias: connection refused"
        )
        assert not controller.in_flight
        assert "connection refused" in caplog.text

    async def test_transport_error_without_message(self, client: MagicMock) -> None:
        client.latest.side_effect = TimeoutError()
        controller = SearchController(_probe({Transport.WIFI}), client)
        await controller.submit("q")

        assert controller.state == Failed(
            ErrorKind.TRANSPORT, "Error al obtener noticias: TimeoutError"
        )

    async def test_completion_failure_leaves_loading(self, client: MagicMock) -> None:
        response = MagicMock()
        response.is_success = True
        response.articles.side_effect = KeyError("results")
        client.latest.return_value = response
        controller = SearchController(_probe({Transport.WIFI}), client)

        await controller.submit("q")

        assert isinstance(controller.state, Failed)
        assert controller.state.kind is ErrorKind.TRANSPORT
        assert not controller.in_flight

    async def test_error_is_cleared_by_next_search(self, client: MagicMock) -> None:
        client.latest.side_effect = [httpx.ConnectError("down"), _response(1)]
        controller = SearchController(_probe({Transport.WIFI}), client)

        await controller.submit("q")
        assert isinstance(controller.state, Failed)

        await controller.submit("q")
        assert isinstance(controller.state, Success)


class TestConcurrency:
    async def test_submit_rejected_while_in_flight(self, client: MagicMock) -> None:
        release = asyncio.Event()

        async def slow_latest(query: str) -> NewsDataResponse:
            await release.wait()
            return _response(10)

        client.latest = AsyncMock(side_effect=slow_latest)
        controller = SearchController(_probe({Transport.WIFI}), client)

        first = asyncio.create_task(controller.submit("first"))
        await asyncio.sleep(0)

        assert controller.in_flight
        assert controller.state == Loading()
        assert await controller.submit("second") is False
        await controller.mount()

        release.set()
        assert await first is True

        client.latest.assert_awaited_once_with("first")
        assert not controller.in_flight
        assert isinstance(controller.state, Success)

    async def test_cancellation_leaves_loading(self, client: MagicMock) -> None:
        async def never_completes(query: str) -> NewsDataResponse:
            await asyncio.Event().wait()
            raise AssertionError("unreachable")

        client.latest = AsyncMock(side_effect=never_completes)
        controller = SearchController(_probe({Transport.WIFI}), client)

        task = asyncio.create_task(controller.submit("q"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert isinstance(controller.state, Failed)
        assert not controller.in_flight


class TestListeners:
    async def test_listener_sees_every_transition(self, client: MagicMock) -> None:
        seen: list[SearchState] = []
        controller = SearchController(_probe({Transport.WIFI}), client)
        controller.subscribe(seen.append)

        await controller.submit("q")

        assert seen[0] == Loading()
        assert isinstance(seen[1], Success)
        assert len(seen) == 2

    async def test_unsubscribe(self, client: MagicMock) -> None:
        seen: list[SearchState] = []
        controller = SearchController(_probe({Transport.WIFI}), client)
        unsubscribe = controller.subscribe(seen.append)
        unsubscribe()

        await controller.submit("q")
        assert seen == []

    async def test_failing_listener_does_not_wedge_controller(self, client: MagicMock) -> None:
        controller = SearchController(_probe({Transport.WIFI}), client)

        def explode(state: SearchState) -> None:
            if isinstance(state, Loading):
                raise RuntimeError("render failed")

        controller.subscribe(explode)
        with pytest.raises(RuntimeError):
            await controller.submit("q")

        assert not controller.in_flight


class TestSearchLogging:
    async def test_writes_record_per_attempt(self, client: MagicMock, tmp_path) -> None:
        search_logger = SearchLogger(log_dir=tmp_path)
        controller = SearchController(
            _probe({Transport.CELLULAR}, battery=80), client, search_logger=search_logger
        )

        await controller.submit("q")

        assert search_logger.last_log_path is not None
        content = search_logger.last_log_path.read_text()
        assert '"outcome": "Success"' in content
        assert '"article_count": 5' in content
        assert '"connection": "cellular"' in content

    async def test_no_record_without_connection(self, client: MagicMock, tmp_path) -> None:
        search_logger = SearchLogger(log_dir=tmp_path)
        controller = SearchController(_probe(None), client, search_logger=search_logger)

        await controller.submit("q")

        assert search_logger.last_log_path is None

    async def test_unwritable_log_dir_does_not_fail_search(
        self, client: MagicMock, tmp_path, caplog: pytest.LogCaptureFixture
    ) -> None:
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory")
        search_logger = SearchLogger(log_dir=blocker)
        controller = SearchController(
            _probe({Transport.WIFI}), client, search_logger=search_logger
        )

        with caplog.at_level("WARNING"):
            assert await controller.submit("q")

        assert isinstance(controller.state, Success)
        assert not controller.in_flight
        assert search_logger.last_log_path is None
        assert "Could not write search log" in caplog.text
