"""Team Matches - async match history and view-state pipeline."""

from .config import get_settings
from .scrapers import TeamMatchesFetcher
from .views import TeamMatchesController

__all__ = ["get_settings", "TeamMatchesFetcher", "TeamMatchesController"]
