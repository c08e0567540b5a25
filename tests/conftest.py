from __future__ import annotations

import pytest

from repodoc.models import RepositoryDescriptor
from tests._fixtures.fetchers import StubFetcher, make_descriptor


@pytest.fixture
def descriptor() -> RepositoryDescriptor:
    """alice/demo: Python, 42 stars, 3 forks, 5 watchers, no license."""
    return make_descriptor()


@pytest.fixture
def stub_fetcher(descriptor: RepositoryDescriptor) -> StubFetcher:
    return StubFetcher(descriptor)
