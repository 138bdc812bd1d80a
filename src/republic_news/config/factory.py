"""Factory functions to create components from configuration."""

from pathlib import Path

from republic_news.config.models import (
    DeviceConfig,
    HostDeviceConfig,
    NewsDataConfig,
    PolicyConfig,
    RepublicNewsConfig,
    StaticDeviceConfig,
)
from republic_news.controller import SearchController
from republic_news.device import (
    DeviceProbe,
    HostBatterySource,
    HostNetworkSource,
    StaticBatterySource,
    StaticNetworkSource,
)
from republic_news.policy import TruncationPolicy
from republic_news.search import NewsDataClient
from republic_news.search_logger import SearchLogger


def create_device_probe(config: DeviceConfig) -> DeviceProbe:
    """Create a device probe from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, HostDeviceConfig):
        return DeviceProbe(network=HostNetworkSource(), battery=HostBatterySource())
    if isinstance(config, StaticDeviceConfig):
        transports = frozenset(config.transports) if config.transports is not None else None
        return DeviceProbe(
            network=StaticNetworkSource(transports),
            battery=StaticBatterySource(config.battery),
        )
    msg = f"Unknown device config type: {type(config)}"
    raise ValueError(msg)


def create_client(config: NewsDataConfig, *, api_key: str | None = None) -> NewsDataClient:
    """Create a newsdata.io client from config."""
    return NewsDataClient(
        api_key=api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        api_key_env=config.api_key_env,
    )


def create_policy(config: PolicyConfig) -> TruncationPolicy:
    """Create a truncation policy from config."""
    return TruncationPolicy(
        low_battery_threshold=config.low_battery_threshold,
        low_battery_cap=config.low_battery_cap,
        cellular_cap=config.cellular_cap,
        default_cap=config.default_cap,
    )


def create_from_config(
    config: RepublicNewsConfig,
    *,
    api_key: str | None = None,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[SearchController, SearchLogger | None]:
    """Create a complete controller from root config.

    Args:
        config: Root configuration.
        api_key: Explicit API key; falls back to the configured env var.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, search_logger).
        search_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    search_logger: SearchLogger | None = None
    if log_enabled:
        search_logger = SearchLogger(log_dir=log_dir, enabled=True)

    controller = SearchController(
        probe=create_device_probe(config.device),
        client=create_client(config.api, api_key=api_key),
        policy=create_policy(config.policy),
        default_query=config.default_query,
        search_logger=search_logger,
    )
    return (controller, search_logger)
