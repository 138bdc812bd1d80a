"""Pydantic configuration models for RepublicNews components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from republic_news.controller import DEFAULT_QUERY
from republic_news.device import Transport
from republic_news.search import NEWSDATA_API_KEY_ENV, NEWSDATA_API_URL

# ============================================================
# News API Config
# ============================================================


class NewsDataConfig(BaseModel):
    """Configuration for NewsDataClient."""

    base_url: str = NEWSDATA_API_URL
    timeout: float = Field(default=30.0, gt=0)
    api_key_env: str = NEWSDATA_API_KEY_ENV

    model_config = {"frozen": True}


# ============================================================
# Device Configs
# ============================================================


class HostDeviceConfig(BaseModel):
    """Read connectivity and battery from the host via psutil."""

    type: Literal["host"] = "host"

    model_config = {"frozen": True}


class StaticDeviceConfig(BaseModel):
    """Simulated device with fixed readings.

    ``transports: null`` simulates no network; ``battery: null`` simulates an
    unreadable battery.
    """

    type: Literal["static"] = "static"
    transports: list[Transport] | None = Field(default_factory=lambda: [Transport.WIFI])
    battery: float | None = Field(default=100, ge=0, le=100)

    model_config = {"frozen": True}


DeviceConfig = Annotated[
    HostDeviceConfig | StaticDeviceConfig,
    Field(discriminator="type"),
]


# ============================================================
# Policy Config
# ============================================================


class PolicyConfig(BaseModel):
    """Caps of the adaptive truncation policy."""

    low_battery_threshold: int = Field(default=20, ge=0, le=100)
    low_battery_cap: int = Field(default=3, ge=0)
    cellular_cap: int = Field(default=5, ge=0)
    default_cap: int = Field(default=10, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-search JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class RepublicNewsConfig(BaseModel):
    """Root configuration for RepublicNews."""

    api: NewsDataConfig = Field(default_factory=NewsDataConfig)
    device: HostDeviceConfig | StaticDeviceConfig = Field(
        default_factory=HostDeviceConfig, discriminator="type"
    )
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    default_query: str = DEFAULT_QUERY
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
