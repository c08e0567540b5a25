"""Repository metadata providers."""

from .base import DescriptorFetcher, FetchError, NotFound, RateLimited, TransportError
from .client import GitHubClient

__all__ = [
    "DescriptorFetcher",
    "FetchError",
    "GitHubClient",
    "NotFound",
    "RateLimited",
    "TransportError",
]
