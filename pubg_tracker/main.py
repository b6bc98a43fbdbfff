"""Command line lookup of filtered PUBG player statistics."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pandas as pd

from .api_client import PubgTrackerClient
from .config import TrackerConfig
from .stats_service import StatsService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch PUBG player stats from pubgtracker.com")
    parser.add_argument("api_key", help="pubgtracker API key")
    parser.add_argument("nickname", help="PUBG nickname to look up")
    parser.add_argument("--region", help='Region such as "na", "eu" or "agg"')
    parser.add_argument("--match", help="Match mode: solo, duo or squad")
    parser.add_argument("--season", help="Season such as 2017-pre1")
    return parser


def create_service(api_key: str) -> StatsService:
    config = TrackerConfig()
    config.set_api_key(api_key)
    return StatsService(client=PubgTrackerClient(config))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    service = create_service(args.api_key)
    table = service.fetch_filtered_stats(
        args.nickname, region=args.region, match=args.match, season=args.season
    )
    if table is None:
        print(f"Could not fetch stats for {args.nickname}.")
        return 1
    if table.empty:
        print(f"No stats found for {args.nickname} with the given filters.")
        return 0

    with pd.option_context("display.max_columns", None, "display.width", None):
        print(table.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
