"""Exceptions raised by the pubgtracker client."""

from http import HTTPStatus
from typing import Optional


class PubgTrackerError(RuntimeError):
    """Base class for pubgtracker client failures."""


class CredentialMissing(PubgTrackerError):
    """Raised when a request is attempted before an API key is set."""


class TransportError(PubgTrackerError):
    """Raised when the request never produced an HTTP response."""


class DecodeError(PubgTrackerError):
    """Raised when a successful response body is not valid JSON."""


class RemoteError(PubgTrackerError):
    """Raised when the API answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, reason: Optional[str] = None) -> None:
        if not reason:
            try:
                reason = HTTPStatus(status_code).phrase
            except ValueError:
                reason = "Unknown Status"
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Response: ({status_code}) {reason}")
