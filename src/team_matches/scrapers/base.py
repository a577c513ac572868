"""Base fetcher with common HTTP functionality."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from ..exceptions import FetchError, InvalidShapeError, NetworkError, ParseError

__all__ = ["BaseFetcher", "FetchError", "NetworkError", "ParseError", "InvalidShapeError"]


def _join_url(base: str, path: str) -> str:
    return base.rstrip("/") + "/" + path.lstrip("/")


class BaseFetcher:
    """Single-attempt JSON fetcher over httpx.

    ``transport`` is handed to ``httpx.AsyncClient`` so tests can point the
    fetcher at an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        user_agent: str = "TeamMatchesBot/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def _build_url(self, path: str) -> str:
        """Build full URL from path."""
        return _join_url(self.base_url, path)

    async def _get_json(self, path: str) -> Any:
        """GET ``path`` once and return the decoded JSON body."""
        url = self._build_url(path)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug(f"GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

        if not response.is_success:
            raise NetworkError(
                f"HTTP {response.status_code} error for {url}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Response from {url} is not valid JSON: {e}", url=url) from e
