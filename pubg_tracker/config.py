"""Configuration objects for the pubgtracker client."""

from dataclasses import dataclass
from typing import Optional

from .errors import CredentialMissing


@dataclass
class TrackerConfig:
    """Configuration for accessing the pubgtracker API."""

    base_url: str = "https://pubgtracker.com/api"
    api_key: Optional[str] = None
    timeout: Optional[float] = None

    def set_api_key(self, api_key: str) -> None:
        """Store ``api_key`` for subsequent requests, replacing any previous key."""

        self.api_key = api_key

    def require_api_key(self) -> str:
        if self.api_key is None:
            raise CredentialMissing(
                "Please specify a valid api key using the set_api_key function."
            )
        return self.api_key
