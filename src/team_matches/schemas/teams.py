"""Pydantic schemas for team snapshots."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .matches import Match


class TeamSnapshot(BaseModel):
    """Normalized data for one team as of the last successful fetch."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Passed through verbatim
    team_banner_url: Any = Field(..., description="Team banner image URL")
    latest_match: Optional[Match] = Field(None, description="Most recent match, if any")
    # Source order, assumed most-recent-first
    recent_matches: Tuple[Match, ...] = Field(default=(), description="Prior matches")
