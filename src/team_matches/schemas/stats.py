"""Pydantic schemas for win/loss/draw statistics."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

CHART_COLORS = {
    "Wins": "#4CAF50",
    "Losses": "#F44336",
    "Draws": "#FFEB3B",
}


class Statistics(BaseModel):
    """Win/loss/draw tally over a snapshot's recent matches."""

    model_config = ConfigDict(frozen=True)

    win: int = Field(0, ge=0, description="Matches won")
    loss: int = Field(0, ge=0, description="Matches lost")
    draw: int = Field(0, ge=0, description="Matches with any other status")

    @property
    def total(self) -> int:
        return self.win + self.loss + self.draw

    def as_chart_rows(self) -> List[Tuple[str, int, str]]:
        """Rows of (label, value, color) for chart renderers."""
        values = {"Wins": self.win, "Losses": self.loss, "Draws": self.draw}
        return [(label, values[label], color) for label, color in CHART_COLORS.items()]
