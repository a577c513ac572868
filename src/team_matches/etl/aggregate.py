from __future__ import annotations

from typing import Iterable

from ..schemas import Match, MatchOutcome, Statistics


def classify_match(match: Match) -> str:
    """Return the Statistics bucket ("win", "loss" or "draw") for a match.

    Any status other than won/lost, including an empty or missing one,
    counts as a draw.
    """
    outcome = match.outcome
    if outcome is MatchOutcome.WON:
        return "win"
    if outcome is MatchOutcome.LOST:
        return "loss"
    return "draw"


def aggregate_statistics(matches: Iterable[Match]) -> Statistics:
    """Reduce matches into win/loss/draw counts."""
    counts = {"win": 0, "loss": 0, "draw": 0}
    for match in matches:
        counts[classify_match(match)] += 1
    return Statistics(**counts)
