"""Shared fixtures for stubbing pubgtracker HTTP traffic."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

LAZYJUSTIN_BODY = {
    "Stats": [
        {"Region": "na", "Match": "solo", "Season": "2017-pre1", "Kills": 5},
    ]
}


def make_response(
    status_code: int = 200,
    body: Any = None,
    *,
    text: Optional[str] = None,
    reason: Optional[str] = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeTransport:
    """Records outgoing GET calls and replays a canned response."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.response = make_response(200, LAZYJUSTIN_BODY)
        self.error: Optional[Exception] = None

    def __call__(self, url, headers=None, params=None, timeout=None):
        self.calls.append(
            {"url": url, "headers": dict(headers or {}), "params": params, "timeout": timeout}
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport(monkeypatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(requests.Session, "get", fake)
    return fake
