"""Normalization and aggregation of team match data."""

from .transform import normalize_match, build_snapshot
from .aggregate import aggregate_statistics, classify_match

__all__ = [
    "normalize_match",
    "build_snapshot",
    "aggregate_statistics",
    "classify_match",
]
