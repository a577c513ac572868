"""
tests/test_aggregate.py

Purpose:
    Win/loss/draw aggregation and its fallback policy.
"""

from __future__ import annotations

import itertools

import pytest

from team_matches.etl.aggregate import aggregate_statistics, classify_match
from team_matches.schemas import Match, Statistics


def _matches(*statuses):
    return [Match(id=str(i), match_status=status) for i, status in enumerate(statuses)]


def test_empty_history_has_zero_counts():
    assert aggregate_statistics([]) == Statistics(win=0, loss=0, draw=0)


@pytest.mark.parametrize("status", ["Won", "WON", "won"])
def test_won_is_case_insensitive(status):
    assert aggregate_statistics(_matches(status)) == Statistics(win=1, loss=0, draw=0)


@pytest.mark.parametrize("status", ["Lost", "LOST", "lost"])
def test_lost_is_case_insensitive(status):
    assert aggregate_statistics(_matches(status)) == Statistics(win=0, loss=1, draw=0)


@pytest.mark.parametrize("status", ["drawn", "", None, "No Result", "won by 5 runs", " won", True, 1, ["won"]])
def test_any_other_status_counts_as_draw(status):
    assert aggregate_statistics(_matches(status)) == Statistics(win=0, loss=0, draw=1)


def test_counts_sum_to_number_of_matches():
    matches = _matches("Won", "Lost", "Drawn", "Won", None, "", "Abandoned")
    stats = aggregate_statistics(matches)

    assert stats == Statistics(win=2, loss=1, draw=4)
    assert stats.win + stats.loss + stats.draw == len(matches)
    assert stats.total == len(matches)


def test_result_does_not_depend_on_order():
    matches = _matches("Won", "Lost", "Drawn", "Won")
    expected = aggregate_statistics(matches)

    for permutation in itertools.permutations(matches):
        assert aggregate_statistics(permutation) == expected


def test_accepts_any_iterable():
    stats = aggregate_statistics(m for m in _matches("Won", "Lost"))
    assert stats == Statistics(win=1, loss=1, draw=0)


def test_classify_match_buckets():
    assert [classify_match(m) for m in _matches("won", "LOST", "tie")] == ["win", "loss", "draw"]


def test_chart_rows_carry_labels_and_colors():
    rows = Statistics(win=3, loss=2, draw=1).as_chart_rows()
    assert rows == [
        ("Wins", 3, "#4CAF50"),
        ("Losses", 2, "#F44336"),
        ("Draws", 1, "#FFEB3B"),
    ]
