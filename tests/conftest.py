"""
tests/conftest.py

Purpose:
    Shared fixtures: sample team payloads and mock match data endpoints.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import httpx
import pytest

from team_matches.scrapers import TeamMatchesFetcher

BASE_URL = "https://api.test/ipl/"


def raw_match(match_id: str, status: Any, **overrides: Any) -> Dict[str, Any]:
    match = {
        "umpires": "CB Gaffaney, VK Sharma",
        "result": f"Royal Challengers Bangalore {str(status).lower()}",
        "man_of_the_match": "AB de Villiers",
        "id": match_id,
        "date": "2020-11-02",
        "venue": "At Sheikh Zayed Stadium, Abu Dhabi",
        "competing_team": "Delhi Capitals",
        "competing_team_logo": "https://assets.test/dc-logo.png",
        "first_innings": "Royal Challengers Bangalore",
        "second_innings": "Delhi Capitals",
        "match_status": status,
    }
    match.update(overrides)
    return match


@pytest.fixture
def team_payload() -> Dict[str, Any]:
    return {
        "team_banner_url": "url1",
        "latest_match_details": raw_match("1216545", "Lost"),
        "recent_matches": [
            raw_match("1216538", "Won"),
            raw_match("1216532", "Lost"),
            raw_match("1216527", "Drawn"),
        ],
    }


class RecordingTransport:
    """Builds an httpx.MockTransport and keeps the requests it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        self.transport = httpx.MockTransport(_handle)


@pytest.fixture
def json_endpoint() -> Callable[..., RecordingTransport]:
    def _make(body: Any, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body))

    return _make


@pytest.fixture
def raw_endpoint() -> Callable[..., RecordingTransport]:
    def _make(content: bytes, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, content=content))

    return _make


@pytest.fixture
def make_fetcher() -> Callable[[RecordingTransport], TeamMatchesFetcher]:
    def _make(endpoint: RecordingTransport) -> TeamMatchesFetcher:
        return TeamMatchesFetcher(base_url=BASE_URL, transport=endpoint.transport)

    return _make
