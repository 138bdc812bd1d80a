"""Device sources backed by the host machine, via psutil."""

import logging

import psutil

from republic_news.device.base import BatteryReading, Transport

logger = logging.getLogger(__name__)

# Interface name prefixes, checked in order. Longer prefixes come first so
# "wwan0" is not mistaken for Wi-Fi.
_INTERFACE_PREFIXES: tuple[tuple[str, Transport], ...] = (
    ("wwan", Transport.CELLULAR),
    ("rmnet", Transport.CELLULAR),
    ("ccmni", Transport.CELLULAR),
    ("pdp_ip", Transport.CELLULAR),
    ("ppp", Transport.CELLULAR),
    ("usb", Transport.CELLULAR),
    ("wlan", Transport.WIFI),
    ("wifi", Transport.WIFI),
    ("wl", Transport.WIFI),
    ("ath", Transport.WIFI),
    ("ra", Transport.WIFI),
    ("utun", Transport.VPN),
    ("tun", Transport.VPN),
    ("tap", Transport.VPN),
    ("wg", Transport.VPN),
    ("eth", Transport.ETHERNET),
    ("en", Transport.ETHERNET),
)

_LOOPBACK_NAMES = frozenset({"lo", "lo0"})

# Host-local bridges and virtual links; always up, never an uplink.
_VIRTUAL_PREFIXES = ("docker", "veth", "br-", "virbr", "vmnet")


def _is_uplink(name: str) -> bool:
    lowered = name.lower()
    return lowered not in _LOOPBACK_NAMES and not lowered.startswith(_VIRTUAL_PREFIXES)


def classify_interface(name: str) -> Transport:
    """Guess an interface's transport from its name."""
    lowered = name.lower()
    for prefix, transport in _INTERFACE_PREFIXES:
        if lowered.startswith(prefix):
            return transport
    return Transport.OTHER


class HostNetworkSource:
    """Reads active interfaces from ``psutil.net_if_stats``.

    Every interface that is up counts as part of the active network, except
    loopback, container/VM bridges and interfaces whose name matches no
    known transport. Their transports are combined; if none remain there is
    no active network.

    Classification is by interface name only. On macOS the built-in Wi-Fi
    adapter is usually ``en0``, which reads as ethernet and so reports an
    ``UNKNOWN`` connection rather than Wi-Fi.
    """

    def active_transports(self) -> frozenset[Transport] | None:
        stats = psutil.net_if_stats()
        transports = {
            classify_interface(name)
            for name, stat in stats.items()
            if stat.isup and _is_uplink(name)
        }
        transports.discard(Transport.OTHER)
        if not transports:
            return None
        return frozenset(transports)


class HostBatterySource:
    """Reads the battery percentage from ``psutil.sensors_battery``."""

    def read_level(self) -> BatteryReading | None:
        sensors_battery = getattr(psutil, "sensors_battery", None)
        if sensors_battery is None:
            logger.debug("Battery sensors not supported on this platform")
            return None
        battery = sensors_battery()
        if battery is None:
            return None
        return (battery.percent, 100)
