"""GitHub REST v3 adapter implementing the descriptor fetcher contract."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, List, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..config import GitHubConfig
from ..logging import get_logger
from ..models import FileEntry, RepositoryDescriptor
from .base import FetchError, NotFound, RateLimited, TransportError

NOT_FOUND_MESSAGE = (
    "Repository not found. Please check the URL and make sure the repository is public."
)
RATE_LIMITED_MESSAGE = "API rate limit exceeded. Please try again later."


class GitHubClient:
    """Fetches repository metadata and contents listings from api.github.com.

    Blocking ``urllib`` calls run on the event loop's default executor so the
    async methods never stall the loop.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        *,
        token: Optional[str] = None,
        user_agent: str = "README-Generator/1.0",
        timeout: float = 30.0,
        opener: Callable[..., Any] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user_agent = user_agent
        self.timeout = timeout
        self._opener = opener or urlopen
        self.logger = get_logger("github")

    @classmethod
    def from_config(cls, config: GitHubConfig) -> "GitHubClient":
        return cls(
            config.base_url,
            token=config.token,
            user_agent=config.user_agent,
            timeout=config.request_timeout,
        )

    async def fetch_descriptor(self, owner: str, name: str) -> RepositoryDescriptor:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_descriptor, owner, name)

    async def fetch_listing(
        self, owner: str, name: str, *, strict: bool = False
    ) -> List[FileEntry]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_listing, owner, name, strict)

    def get_descriptor(self, owner: str, name: str) -> RepositoryDescriptor:
        """Blocking variant of :meth:`fetch_descriptor`."""
        path = f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}"
        self.logger.debug("Fetching repository data from %s%s", self.base_url, path)
        payload = self._get_json(path)
        if not isinstance(payload, dict):
            raise TransportError("GitHub returned an unexpected repository payload")
        try:
            return RepositoryDescriptor.from_api(payload)
        except ValueError as exc:
            raise TransportError(f"GitHub returned an incomplete repository payload: {exc}") from exc

    def get_listing(self, owner: str, name: str, strict: bool = False) -> List[FileEntry]:
        """Blocking variant of :meth:`fetch_listing`."""
        path = f"/repos/{quote(owner, safe='')}/{quote(name, safe='')}/contents"
        try:
            payload = self._get_json(path)
        except FetchError as exc:
            if strict:
                raise
            self.logger.warning("Could not fetch repository contents for %s/%s: %s", owner, name, exc)
            return []
        if not isinstance(payload, list):
            if strict:
                raise TransportError("GitHub returned an unexpected contents payload")
            self.logger.warning("Contents payload for %s/%s is not a list; ignoring", owner, name)
            return []
        entries = [FileEntry.from_api(item) for item in payload if isinstance(item, dict)]
        self.logger.debug("Repository contents fetched: %d items", len(entries))
        return entries

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_json(self, path: str) -> Any:
        request = Request(f"{self.base_url}{path}", headers=self._headers(), method="GET")
        try:
            with self._opener(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            raise self._map_http_error(exc) from exc
        except URLError as exc:
            raise TransportError(f"Failed to reach GitHub: {exc.reason}") from exc
        except (TimeoutError, OSError) as exc:
            raise TransportError(f"Failed to reach GitHub: {exc}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise TransportError("GitHub returned invalid JSON") from exc

    @staticmethod
    def _map_http_error(exc: HTTPError) -> FetchError:
        if exc.code == 404:
            return NotFound(NOT_FOUND_MESSAGE)
        if exc.code == 403 or exc.code == 429:
            return RateLimited(RATE_LIMITED_MESSAGE)
        return TransportError(f"Failed to fetch repository: {exc.code} {exc.reason}")


__all__ = ["GitHubClient", "NOT_FOUND_MESSAGE", "RATE_LIMITED_MESSAGE"]
