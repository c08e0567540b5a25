"""Contract and failure taxonomy for repository metadata providers."""

from __future__ import annotations

from typing import List, Protocol

from ..models import FileEntry, RepositoryDescriptor


class FetchError(RuntimeError):
    """Base class for failures reported by a descriptor fetcher.

    The message is user-facing; the workflow controller shows it verbatim.
    """


class NotFound(FetchError):
    """The repository does not exist or is not public."""


class RateLimited(FetchError):
    """The provider refused the request because of API rate limits."""


class TransportError(FetchError):
    """The request failed in transit or returned an unusable payload."""


class DescriptorFetcher(Protocol):
    """Provider of repository descriptors and top-level listings."""

    async def fetch_descriptor(self, owner: str, name: str) -> RepositoryDescriptor:
        """Return repository metadata or raise a :class:`FetchError`."""
        ...

    async def fetch_listing(
        self, owner: str, name: str, *, strict: bool = False
    ) -> List[FileEntry]:
        """Return top-level entries.

        Failures yield an empty list unless ``strict`` is set, in which case
        they raise :class:`FetchError`.
        """
        ...


__all__ = ["DescriptorFetcher", "FetchError", "NotFound", "RateLimited", "TransportError"]
