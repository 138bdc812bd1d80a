"""Device-state sampling."""

from republic_news.device.base import (
    UNAVAILABLE,
    BatteryReading,
    BatterySource,
    NetworkSource,
    Transport,
)
from republic_news.device.host import HostBatterySource, HostNetworkSource, classify_interface
from republic_news.device.probe import (
    DEFAULT_BATTERY_PERCENT,
    DeviceProbe,
    battery_percent,
    classify_connection,
)
from republic_news.device.static import StaticBatterySource, StaticNetworkSource

__all__ = [
    "DEFAULT_BATTERY_PERCENT",
    "UNAVAILABLE",
    "BatteryReading",
    "BatterySource",
    "DeviceProbe",
    "HostBatterySource",
    "HostNetworkSource",
    "NetworkSource",
    "StaticBatterySource",
    "StaticNetworkSource",
    "Transport",
    "battery_percent",
    "classify_connection",
    "classify_interface",
]
