"""Match data fetchers."""

from .base import BaseFetcher, FetchError, NetworkError, ParseError, InvalidShapeError
from .team_matches_api import TeamMatchesFetcher

__all__ = [
    "BaseFetcher",
    "FetchError",
    "NetworkError",
    "ParseError",
    "InvalidShapeError",
    "TeamMatchesFetcher",
]
