"""GitHub repository lookup over the public REST API."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.config import settings
from core.exceptions import UpstreamError

logger = structlog.get_logger()

USER_AGENT = "devconnector-api"


class GitHubClient:
    """Fetches a user's most recent public repositories.

    Any transport failure or non-2xx answer is reported as
    ``UpstreamError``; nothing is retried.
    """

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        access_token: str = settings.github_access_token,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github+json",
        }
        if self._access_token:
            headers["Authorization"] = f"token {self._access_token}"
        return headers

    async def get_repos(self, username: str, limit: int = 5) -> list[dict[str, Any]]:
        """Return up to ``limit`` repositories, oldest created first."""
        url = f"{self._base_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": limit, "sort": "created:asc"}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                repos = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("github_lookup_failed", username=username, error=str(exc))
            raise UpstreamError(username) from exc

        if not isinstance(repos, list):
            logger.warning("github_unexpected_payload", username=username)
            raise UpstreamError(username)

        return repos
