from __future__ import annotations

from typing import Any, Mapping, Optional

from ..exceptions import InvalidShapeError
from ..schemas import Match, TeamSnapshot

# internal field -> server key
MATCH_FIELDS = {
    "umpires": "umpires",
    "result": "result",
    "man_of_the_match": "man_of_the_match",
    "id": "id",
    "date": "date",
    "venue": "venue",
    "competing_team": "competing_team",
    "competing_team_logo": "competing_team_logo",
    "first_innings": "first_innings",
    "second_innings": "second_innings",
    "match_status": "match_status",
}


def normalize_match(raw: Mapping[str, Any]) -> Match:
    """Map one raw match record (server field names) to a Match.

    Keys missing on ``raw`` stay ``None`` on the result; nothing is defaulted.
    """
    return Match(**{field: raw.get(key) for field, key in MATCH_FIELDS.items()})


def build_snapshot(payload: Mapping[str, Any]) -> TeamSnapshot:
    """Build a TeamSnapshot from a parsed team response.

    ``latest_match_details`` that is missing or not an object gives no latest
    match; ``recent_matches`` that is missing or not a list gives an empty
    history. A recent-matches entry that is not an object raises
    InvalidShapeError.
    """
    latest_raw = payload.get("latest_match_details")
    latest: Optional[Match] = normalize_match(latest_raw) if isinstance(latest_raw, Mapping) else None

    recent_raw = payload.get("recent_matches")
    if not isinstance(recent_raw, (list, tuple)):
        recent_raw = []

    recent = []
    for index, item in enumerate(recent_raw):
        if not isinstance(item, Mapping):
            raise InvalidShapeError(f"recent_matches[{index}] is not an object: {item!r}")
        recent.append(normalize_match(item))

    return TeamSnapshot(
        team_banner_url=payload["team_banner_url"],
        latest_match=latest,
        recent_matches=tuple(recent),
    )
