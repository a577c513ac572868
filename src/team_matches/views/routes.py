"""Route helpers: per-team style tokens and navigation."""

from __future__ import annotations

from typing import List, Optional, Protocol

HOME_ROUTE = "/"

TEAM_CLASS_MAP = {
    "RCB": "rcb",
    "KKR": "kkr",
    "KXP": "kxp",
    "CSK": "csk",
    "RR": "rr",
    "MI": "mi",
    "SH": "srh",
    "SRH": "srh",
    "DC": "dc",
}


def route_class_name(team_id: Optional[str]) -> str:
    """Style token for a team identifier; unknown identifiers give ""."""
    if not team_id:
        return ""
    return TEAM_CLASS_MAP.get(team_id, "")


def container_class_name(team_id: Optional[str]) -> str:
    return f"team-matches-container {route_class_name(team_id)}".strip()


class Navigator(Protocol):
    def replace(self, route: str) -> None:
        ...


class History:
    """In-memory navigation history."""

    def __init__(self, initial: str = HOME_ROUTE):
        self.entries: List[str] = [initial]

    @property
    def current(self) -> str:
        return self.entries[-1]

    def push(self, route: str) -> None:
        self.entries.append(route)

    def replace(self, route: str) -> None:
        self.entries[-1] = route
