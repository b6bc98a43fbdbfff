"""HTTP client utilities for communicating with the pubgtracker API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from .config import TrackerConfig
from .errors import DecodeError, RemoteError, TransportError


@dataclass
class PubgTrackerClient:
    """Lightweight pubgtracker API client."""

    config: TrackerConfig

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "TRN-Api-Key": self.config.require_api_key(),
        }

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Perform a GET request against the pubgtracker API.

        Args:
            path: API path, e.g. "profile/pc/{nickname}" or "search".
            params: Optional query parameters to include in the request.

        Returns:
            Parsed JSON response.

        Raises:
            CredentialMissing: If no API key has been configured. No request
                is sent in that case.
            TransportError: If the request fails before a response arrives.
            RemoteError: If the API returns a non-200 status.
            DecodeError: If the response body is not valid JSON.
        """

        headers = self._build_headers()
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        with requests.Session() as session:
            session.trust_env = False
            try:
                response = session.get(
                    url, headers=headers, params=params, timeout=self.config.timeout
                )
            except requests.RequestException as exc:
                raise TransportError(f"pubgtracker request failed: {exc}") from exc
        if response.status_code != 200:
            raise RemoteError(response.status_code, response.reason)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"pubgtracker returned invalid JSON: {exc}") from exc

    def get_player_stats(self, nickname: str) -> Any:
        """Fetch the statistics profile for a PC player nickname."""

        return self.get(f"profile/pc/{quote(nickname, safe='')}")

    def search_by_steam_id(self, steam_id: str) -> Any:
        """Look up player metadata by 64-bit Steam ID."""

        return self.get("search", params={"steamId": steam_id})
