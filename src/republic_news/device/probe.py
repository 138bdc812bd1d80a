"""Device-state probe: samples connectivity and battery."""

import logging

from republic_news.data import ConnectionClass, DeviceState
from republic_news.device.base import (
    UNAVAILABLE,
    BatteryReading,
    BatterySource,
    NetworkSource,
    Transport,
)

logger = logging.getLogger(__name__)

DEFAULT_BATTERY_PERCENT = 100


def classify_connection(transports: frozenset[Transport] | None) -> ConnectionClass:
    """Map the active network's transports to a connection class.

    Wi-Fi wins over cellular when a network advertises both. A network that
    advertises neither is ``UNKNOWN``; no network at all is ``NONE``.
    """
    if transports is None:
        return ConnectionClass.NONE
    if Transport.WIFI in transports:
        return ConnectionClass.WIFI
    if Transport.CELLULAR in transports:
        return ConnectionClass.CELLULAR
    return ConnectionClass.UNKNOWN


def battery_percent(reading: BatteryReading | None) -> int:
    """Convert a ``(level, scale)`` reading to a whole percentage.

    Unreadable readings report ``DEFAULT_BATTERY_PERCENT``. The result is
    truncated toward zero and clamped to 0..100.
    """
    if reading is None:
        return DEFAULT_BATTERY_PERCENT
    level, scale = reading
    if level == UNAVAILABLE or scale == UNAVAILABLE:
        return DEFAULT_BATTERY_PERCENT
    if scale <= 0:
        return DEFAULT_BATTERY_PERCENT
    percent = int(level * 100 / scale)
    return max(0, min(100, percent))


class DeviceProbe:
    """Samples a ``DeviceState`` from platform collaborators.

    ``sample`` never raises: a collaborator failure is logged and replaced
    by the safe default for that reading.

    Args:
        network: Source of the active network's transports.
        battery: Source of the battery ``(level, scale)`` reading.
    """

    def __init__(self, network: NetworkSource, battery: BatterySource) -> None:
        self._network = network
        self._battery = battery

    def sample(self) -> DeviceState:
        """Take a snapshot of the current connection class and battery level."""
        return DeviceState(
            connection=self._sample_connection(),
            battery_percent=self._sample_battery(),
        )

    def _sample_connection(self) -> ConnectionClass:
        try:
            transports = self._network.active_transports()
        except Exception as e:
            logger.warning("Could not query active network, assuming none. Error: %s", e)
            return ConnectionClass.NONE
        return classify_connection(transports)

    def _sample_battery(self) -> int:
        try:
            reading = self._battery.read_level()
        except Exception as e:
            logger.warning("Could not read battery status, assuming full. Error: %s", e)
            return DEFAULT_BATTERY_PERCENT
        return battery_percent(reading)
