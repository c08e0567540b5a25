"""Test doubles for descriptor fetchers."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import List, Optional, Sequence

from repodoc.github.base import FetchError
from repodoc.models import FileEntry, License, Owner, RepositoryDescriptor


def make_descriptor(**overrides: object) -> RepositoryDescriptor:
    """Return a descriptor for alice/demo with optional field overrides."""
    descriptor = RepositoryDescriptor(
        name="demo",
        full_name="alice/demo",
        html_url="https://github.com/alice/demo",
        stargazers_count=42,
        forks_count=3,
        watchers_count=5,
        created_at="2024-01-05T10:00:00Z",
        owner=Owner(login="alice", avatar_url="https://avatars.example/alice.png"),
        description=None,
        language="Python",
        license=None,
    )
    return replace(descriptor, **overrides)  # type: ignore[arg-type]


def mit_license() -> License:
    return License(name="MIT License", spdx_id="MIT")


def listing(*names: str) -> List[FileEntry]:
    return [FileEntry(name=name) for name in names]


class StubFetcher:
    """Fetcher returning canned results and recording every call."""

    def __init__(
        self,
        descriptor: Optional[RepositoryDescriptor] = None,
        entries: Sequence[FileEntry] = (),
        *,
        descriptor_error: Optional[FetchError] = None,
        listing_error: Optional[FetchError] = None,
    ) -> None:
        self.descriptor = descriptor or make_descriptor()
        self.entries = list(entries)
        self.descriptor_error = descriptor_error
        self.listing_error = listing_error
        self.descriptor_calls: List[tuple[str, str]] = []
        self.listing_calls: List[tuple[str, str, bool]] = []

    async def fetch_descriptor(self, owner: str, name: str) -> RepositoryDescriptor:
        self.descriptor_calls.append((owner, name))
        if self.descriptor_error is not None:
            raise self.descriptor_error
        return self.descriptor

    async def fetch_listing(
        self, owner: str, name: str, *, strict: bool = False
    ) -> List[FileEntry]:
        self.listing_calls.append((owner, name, strict))
        if self.listing_error is not None:
            if strict:
                raise self.listing_error
            return []
        return list(self.entries)


class GatedFetcher(StubFetcher):
    """Fetcher whose descriptor lookup blocks until ``release`` is called."""

    def __init__(self, *args: object, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[arg-type]
        self.started = asyncio.Event()
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    async def fetch_descriptor(self, owner: str, name: str) -> RepositoryDescriptor:
        self.started.set()
        await self._gate.wait()
        return await super().fetch_descriptor(owner, name)
