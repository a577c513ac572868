"""Team matches API fetcher implementation."""

from typing import Mapping, Optional

import httpx
from loguru import logger

from ..etl.transform import build_snapshot
from ..schemas import TeamSnapshot
from .base import BaseFetcher, InvalidShapeError


class TeamMatchesFetcher(BaseFetcher):
    """Fetches and normalizes one team's match history."""

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "TeamMatchesFetcher":
        return cls(
            base_url=settings.api.base_url,
            timeout=settings.api.timeout,
            user_agent=settings.api.user_agent,
            transport=transport,
        )

    async def fetch(self, team_id: str) -> TeamSnapshot:
        """Fetch the snapshot for ``team_id``.

        The identifier is not validated locally. Raises NetworkError,
        ParseError or InvalidShapeError; never retries.
        """
        url = self._build_url(team_id)
        payload = await self._get_json(team_id)

        if not isinstance(payload, Mapping) or not payload.get("team_banner_url"):
            raise InvalidShapeError(f"Response from {url} has no team_banner_url", url=url)

        try:
            snapshot = build_snapshot(payload)
        except InvalidShapeError as e:
            raise InvalidShapeError(f"Malformed match record in response from {url}: {e}", url=url) from e

        logger.info(f"Fetched {len(snapshot.recent_matches)} recent matches for {team_id}")
        return snapshot
