"""Fixed device sources, used to simulate a device from configuration."""

from republic_news.device.base import BatteryReading, Transport


class StaticNetworkSource:
    """Network source that always reports the same transports.

    Args:
        transports: Transports of the simulated network, or None for no
            network at all.
    """

    def __init__(self, transports: frozenset[Transport] | None) -> None:
        self._transports = transports

    def active_transports(self) -> frozenset[Transport] | None:
        return self._transports


class StaticBatterySource:
    """Battery source that always reports the same ``(level, scale)`` pair."""

    def __init__(self, level: int | float | None, scale: int | float = 100) -> None:
        self._level = level
        self._scale = scale

    def read_level(self) -> BatteryReading | None:
        if self._level is None:
            return None
        return (self._level, self._scale)
