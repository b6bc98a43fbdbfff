"""Business logic for fetching and shaping player statistics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pandas as pd

from .api_client import PubgTrackerClient
from .errors import RemoteError

logger = logging.getLogger(__name__)

FILTER_COLUMNS = ("Region", "Match", "Season")


def stats_table(result: Any) -> pd.DataFrame:
    """Project the ``Stats`` collection of a player result into a new frame.

    A single ``Stats`` object becomes a one-row frame. Items that are not
    objects are skipped.
    """

    if not isinstance(result, Mapping):
        return pd.DataFrame()
    records = result.get("Stats") or []
    if isinstance(records, Mapping):
        records = [records]
    elif not isinstance(records, list):
        return pd.DataFrame()
    return pd.DataFrame(
        [dict(record) for record in records if isinstance(record, Mapping)]
    )


def filter_stats_table(
    table: pd.DataFrame,
    region: Optional[str] = None,
    match: Optional[str] = None,
    season: Optional[str] = None,
) -> pd.DataFrame:
    """Keep rows whose Region/Match/Season equal the given values.

    Arguments left as ``None`` do not filter. Comparison is exact and
    case-sensitive. A filter on a column the table lacks matches nothing.
    """

    filtered = table
    for column, value in zip(FILTER_COLUMNS, (region, match, season)):
        if value is None:
            continue
        if column not in filtered.columns:
            filtered = filtered.iloc[0:0]
            continue
        filtered = filtered[filtered[column] == value]
    return filtered.reset_index(drop=True)


def expand_nested_stats(table: pd.DataFrame) -> pd.DataFrame:
    """Concatenate the nested ``Stats`` records of every row into one frame."""

    if "Stats" not in table.columns:
        return pd.DataFrame()
    records = []
    for nested in table["Stats"]:
        if isinstance(nested, list):
            records.extend(dict(item) for item in nested if isinstance(item, Mapping))
        elif isinstance(nested, Mapping):
            records.append(dict(nested))
    return pd.DataFrame(records)


@dataclass
class StatsService:
    """High-level operations for retrieving player statistics."""

    client: PubgTrackerClient

    def fetch_player_stats(self, nickname: str) -> Optional[Any]:
        """Return the raw statistics profile for ``nickname``.

        Returns ``None`` and logs the HTTP status when the API answers with
        anything but 200.

        Raises:
            CredentialMissing: If no API key has been set.
        """

        return self._fetch_or_none(self.client.get_player_stats, nickname)

    def find_player_by_steam_id(self, steam_id: str) -> Optional[Any]:
        """Return player metadata for a 64-bit Steam ID, or ``None`` on HTTP errors."""

        return self._fetch_or_none(self.client.search_by_steam_id, steam_id)

    def fetch_filtered_stats(
        self,
        nickname: str,
        region: Optional[str] = None,
        match: Optional[str] = None,
        season: Optional[str] = None,
        *,
        expand: Optional[bool] = None,
    ) -> Optional[pd.DataFrame]:
        """Return the player's stats table filtered by region, match and season.

        Args:
            nickname: Player nickname to look up.
            region: Region of interest, e.g. "na", "as", or "agg" for the
                aggregate across all regions.
            match: Match mode: "solo", "duo" or "squad".
            season: Season identifier such as "2017-pre1".
            expand: Whether to return the nested ``Stats`` records of the
                matching rows instead of the rows themselves. By default this
                happens only when all three filters are given.

        Returns:
            The filtered frame, possibly empty, or ``None`` if the statistics
            fetch failed with an HTTP error.
        """

        result = self.fetch_player_stats(nickname)
        if result is None:
            return None

        table = filter_stats_table(
            stats_table(result), region=region, match=match, season=season
        )
        if expand is None:
            expand = region is not None and match is not None and season is not None
        if expand:
            return expand_nested_stats(table)
        return table

    def _fetch_or_none(self, fetch: Callable[[str], Any], key: str) -> Optional[Any]:
        try:
            return fetch(key)
        except RemoteError as exc:
            logger.error("%s", exc)
            return None
