"""Adaptive truncation policy: how many articles a device should display."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from republic_news.data import ConnectionClass

T = TypeVar("T")


@dataclass(frozen=True)
class TruncationPolicy:
    """Caps applied to a result list, in priority order.

    Args:
        low_battery_threshold: Battery percentage below which the low-battery
            cap applies, regardless of connection type.
        low_battery_cap: Articles shown on low battery.
        cellular_cap: Articles shown on cellular data.
        default_cap: Articles shown otherwise (Wi-Fi, unknown transport).
    """

    low_battery_threshold: int = 20
    low_battery_cap: int = 3
    cellular_cap: int = 5
    default_cap: int = 10


DEFAULT_POLICY = TruncationPolicy()


def truncation_cap(
    battery_percent: int,
    connection: ConnectionClass,
    policy: TruncationPolicy = DEFAULT_POLICY,
) -> int:
    """Select the maximum number of articles to display.

    Low battery takes precedence over the connection type, even on Wi-Fi.
    """
    if battery_percent < policy.low_battery_threshold:
        return policy.low_battery_cap
    if connection is ConnectionClass.CELLULAR:
        return policy.cellular_cap
    return policy.default_cap


def truncate_articles(
    battery_percent: int,
    connection: ConnectionClass,
    articles: Sequence[T],
    policy: TruncationPolicy = DEFAULT_POLICY,
) -> list[T]:
    """Return the first ``cap`` articles, preserving source order.

    Lists shorter than the cap are returned unchanged (no padding).
    """
    cap = truncation_cap(battery_percent, connection, policy)
    return list(articles[:cap])
