"""RepublicNews: latest headlines, sized to the device's network and battery."""

from republic_news.config import RepublicNewsConfig, create_from_config, load_config
from republic_news.controller import (
    Failed,
    Idle,
    Loading,
    SearchController,
    SearchState,
    Success,
    to_search_result,
)
from republic_news.data import (
    Article,
    ConnectionClass,
    DeviceState,
    Empty,
    ErrorKind,
    ErrorResult,
    LoadingResult,
    NoConnection,
    Results,
    SearchResult,
)
from republic_news.device import (
    BatterySource,
    DeviceProbe,
    HostBatterySource,
    HostNetworkSource,
    NetworkSource,
    StaticBatterySource,
    StaticNetworkSource,
    Transport,
)
from republic_news.policy import DEFAULT_POLICY, TruncationPolicy, truncate_articles, truncation_cap
from republic_news.render import render_screen
from republic_news.search import NewsClient, NewsDataClient, NewsDataResponse
from republic_news.search_logger import SearchLogger

__all__ = [
    # Models
    "Article",
    "ConnectionClass",
    "DeviceState",
    "ErrorKind",
    # Display results
    "Empty",
    "ErrorResult",
    "LoadingResult",
    "NoConnection",
    "Results",
    "SearchResult",
    # Controller
    "Failed",
    "Idle",
    "Loading",
    "SearchController",
    "SearchState",
    "Success",
    "to_search_result",
    # Policy
    "DEFAULT_POLICY",
    "TruncationPolicy",
    "truncate_articles",
    "truncation_cap",
    # Protocols
    "BatterySource",
    "NetworkSource",
    "NewsClient",
    # Device
    "DeviceProbe",
    "HostBatterySource",
    "HostNetworkSource",
    "StaticBatterySource",
    "StaticNetworkSource",
    "Transport",
    # Clients
    "NewsDataClient",
    "NewsDataResponse",
    # Rendering
    "render_screen",
    # Logging
    "SearchLogger",
    # Config
    "RepublicNewsConfig",
    "create_from_config",
    "load_config",
]
