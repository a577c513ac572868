"""View-state pipeline consumed by renderers."""

from .controller import FAILURE_MESSAGE, TeamMatchesController
from .routes import History, TEAM_CLASS_MAP, container_class_name, route_class_name
from .state import Failed, Idle, Loading, Ready, ViewState

__all__ = [
    "FAILURE_MESSAGE",
    "TeamMatchesController",
    "History",
    "TEAM_CLASS_MAP",
    "container_class_name",
    "route_class_name",
    "Failed",
    "Idle",
    "Loading",
    "Ready",
    "ViewState",
]
