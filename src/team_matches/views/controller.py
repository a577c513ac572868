"""View-state controller for a single team's match history."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

from loguru import logger

from ..etl.aggregate import aggregate_statistics
from ..scrapers.base import FetchError
from ..scrapers.team_matches_api import TeamMatchesFetcher
from .routes import HOME_ROUTE, Navigator, container_class_name, route_class_name
from .state import Failed, Idle, Loading, Ready, ViewState

FAILURE_MESSAGE = "Failed to load team matches"

Listener = Callable[[ViewState], None]


class TeamMatchesController:
    """Owns the Idle -> Loading -> Ready | Failed lifecycle for one team.

    Every ``mount`` takes a new generation number. A fetch that settles after
    a newer mount has started is dropped, so the latest mount always wins.
    Earlier fetches are not cancelled.
    """

    def __init__(
        self,
        team_id: str,
        fetcher: TeamMatchesFetcher,
        enable_statistics: bool = True,
        navigator: Optional[Navigator] = None,
    ):
        self.team_id = team_id
        self.fetcher = fetcher
        self.enable_statistics = enable_statistics
        self.navigator = navigator
        self._state: ViewState = Idle()
        self._generation = 0
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def container_class_name(self) -> str:
        return container_class_name(self.team_id)

    @property
    def route_class_name(self) -> str:
        return route_class_name(self.team_id)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for published states; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, state: ViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def mount(self, team_id: Optional[str] = None) -> ViewState:
        """Fetch data for ``team_id`` (default: the current one) and publish the result."""
        if team_id is not None:
            self.team_id = team_id
        team_id = self.team_id

        self._generation += 1
        generation = self._generation
        self._publish(Loading(team_id=team_id))

        try:
            snapshot = await self.fetcher.fetch(team_id)
        except FetchError as e:
            logger.bind(kind=e.kind, team_id=team_id, url=e.url).warning(
                f"Error fetching team matches for {team_id} ({e.kind}): {e}"
            )
            result: ViewState = Failed(team_id=team_id, message=FAILURE_MESSAGE)
        else:
            statistics = aggregate_statistics(snapshot.recent_matches) if self.enable_statistics else None
            result = Ready(team_id=team_id, snapshot=snapshot, statistics=statistics)

        if generation != self._generation:
            logger.debug(f"Discarding stale result for {team_id} (generation {generation} < {self._generation})")
            return self._state

        self._publish(result)
        return result

    def start(self, team_id: Optional[str] = None) -> "asyncio.Task[ViewState]":
        """Schedule ``mount`` on the running loop without awaiting it."""
        return asyncio.create_task(self.mount(team_id))

    def navigate_back(self) -> None:
        """Replace the current route with the home route."""
        if self.navigator is None:
            logger.debug("No navigator attached; ignoring back navigation")
            return
        self.navigator.replace(HOME_ROUTE)
