"""Module-level helpers sharing one default configuration.

Typical use::

    from pubg_tracker import tracker

    tracker.set_api_key("00000000-0000-0000-0000-000000000000")
    tracker.fetch_filtered_stats("lazyjustin", region="na", match="solo")
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from .api_client import PubgTrackerClient
from .config import TrackerConfig
from .stats_service import StatsService

_default_config = TrackerConfig()


def get_default_config() -> TrackerConfig:
    return _default_config


def _service() -> StatsService:
    return StatsService(client=PubgTrackerClient(_default_config))


def set_api_key(api_key: str) -> None:
    """Set the pubgtracker API key used by the functions in this module."""

    _default_config.set_api_key(api_key)


def fetch_player_stats(nickname: str) -> Optional[Any]:
    return _service().fetch_player_stats(nickname)


def find_player_by_steam_id(steam_id: str) -> Optional[Any]:
    return _service().find_player_by_steam_id(steam_id)


def fetch_filtered_stats(
    nickname: str,
    region: Optional[str] = None,
    match: Optional[str] = None,
    season: Optional[str] = None,
    *,
    expand: Optional[bool] = None,
) -> Optional[pd.DataFrame]:
    return _service().fetch_filtered_stats(
        nickname, region=region, match=match, season=season, expand=expand
    )
