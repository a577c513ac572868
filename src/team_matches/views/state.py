"""View states published by the team matches controller.

Exactly one of these is current at any time:

- ``Idle``: nothing requested yet
- ``Loading``: a fetch for ``team_id`` is in flight
- ``Ready``: snapshot and (optionally) statistics are available
- ``Failed``: the fetch failed; only a human-readable message is kept
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ..schemas import Statistics, TeamSnapshot


@dataclass(frozen=True)
class Idle:
    status = "idle"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status}


@dataclass(frozen=True)
class Loading:
    team_id: str
    status = "loading"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "teamId": self.team_id}


@dataclass(frozen=True)
class Ready:
    team_id: str
    snapshot: TeamSnapshot
    statistics: Optional[Statistics] = None
    status = "ready"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "teamId": self.team_id,
            "teamMatchesData": self.snapshot.model_dump(by_alias=True, mode="json"),
            "statistics": self.statistics.model_dump(mode="json") if self.statistics else None,
        }


@dataclass(frozen=True)
class Failed:
    team_id: str
    message: str
    status = "failed"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "teamId": self.team_id, "error": self.message}


ViewState = Union[Idle, Loading, Ready, Failed]
