"""Pydantic schemas for normalized team match data."""

from .matches import Match, MatchOutcome
from .teams import TeamSnapshot
from .stats import Statistics

__all__ = [
    "Match",
    "MatchOutcome",
    "TeamSnapshot",
    "Statistics",
]
