"""pubgtracker.com API client package."""

from .api_client import PubgTrackerClient
from .config import TrackerConfig
from .errors import (
    CredentialMissing,
    DecodeError,
    PubgTrackerError,
    RemoteError,
    TransportError,
)
from .stats_service import (
    StatsService,
    expand_nested_stats,
    filter_stats_table,
    stats_table,
)

__all__ = [
    "CredentialMissing",
    "DecodeError",
    "PubgTrackerClient",
    "PubgTrackerError",
    "RemoteError",
    "StatsService",
    "TrackerConfig",
    "TransportError",
    "expand_nested_stats",
    "filter_stats_table",
    "stats_table",
]
