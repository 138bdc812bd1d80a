"""Protocols for the platform collaborators the device probe reads from."""

from enum import StrEnum
from typing import Protocol

BatteryReading = tuple[int | float, int | float]

# Sentinel the platform reports for an unreadable level or scale.
UNAVAILABLE = -1


class Transport(StrEnum):
    """Transport advertised by an active network."""

    WIFI = "wifi"
    CELLULAR = "cellular"
    ETHERNET = "ethernet"
    VPN = "vpn"
    OTHER = "other"


class NetworkSource(Protocol):
    """Interface for querying the active network's capabilities."""

    def active_transports(self) -> frozenset[Transport] | None:
        """Return the transports of the active network.

        Returns:
            The advertised transports, or None if no network is active.
        """
        ...


class BatterySource(Protocol):
    """Interface for reading the platform power status."""

    def read_level(self) -> BatteryReading | None:
        """Return the current ``(level, scale)`` pair.

        Returns:
            The reading, or None if the power status is unavailable. Either
            slot may hold ``UNAVAILABLE``.
        """
        ...
