"""Configuration module for RepublicNews."""

from republic_news.config.factory import (
    create_client,
    create_device_probe,
    create_from_config,
    create_policy,
)
from republic_news.config.loader import get_default_config_path, load_config
from republic_news.config.models import (
    DeviceConfig,
    HostDeviceConfig,
    LoggingConfig,
    NewsDataConfig,
    PolicyConfig,
    RepublicNewsConfig,
    StaticDeviceConfig,
)

__all__ = [
    "DeviceConfig",
    "HostDeviceConfig",
    "LoggingConfig",
    "NewsDataConfig",
    "PolicyConfig",
    "RepublicNewsConfig",
    "StaticDeviceConfig",
    "create_client",
    "create_device_probe",
    "create_from_config",
    "create_policy",
    "get_default_config_path",
    "load_config",
]
