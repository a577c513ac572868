"""Pydantic schemas for normalized match records."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MatchOutcome(str, Enum):
    """Outcome of a match from the viewed team's perspective."""
    WON = "won"
    LOST = "lost"
    OTHER = "other"


class Match(BaseModel):
    """One match in a team's history.

    Values are copied as sent by the source, whatever their type; an omitted
    field stays ``None`` rather than being defaulted. Serialized with
    camelCase aliases, which is the shape renderers consume.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: Optional[Any] = Field(None, description="Match ID")
    date: Optional[Any] = Field(None, description="Match date as sent by the source")
    venue: Optional[Any] = Field(None, description="Venue")
    umpires: Optional[Any] = Field(None, description="Umpires")
    result: Optional[Any] = Field(None, description="Result summary")
    man_of_the_match: Optional[Any] = Field(None, description="Player of the match")
    competing_team: Optional[Any] = Field(None, description="Opponent name")
    competing_team_logo: Optional[Any] = Field(None, description="Opponent logo URL")
    first_innings: Optional[Any] = Field(None, description="Team batting first")
    second_innings: Optional[Any] = Field(None, description="Team batting second")
    match_status: Optional[Any] = Field(None, description="Free-form status, e.g. Won/Lost")

    @property
    def outcome(self) -> MatchOutcome:
        """Classify ``match_status`` case-insensitively; non-strings are OTHER."""
        if not isinstance(self.match_status, str):
            return MatchOutcome.OTHER
        status = self.match_status.lower()
        if status == MatchOutcome.WON.value:
            return MatchOutcome.WON
        if status == MatchOutcome.LOST.value:
            return MatchOutcome.LOST
        return MatchOutcome.OTHER
