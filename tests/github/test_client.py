"""Tests for the GitHub REST adapter."""

from __future__ import annotations

import asyncio
import io
import json
from typing import Any, List
from urllib.error import HTTPError, URLError
from urllib.request import Request

import pytest

from repodoc.config import GitHubConfig
from repodoc.github import GitHubClient, NotFound, RateLimited, TransportError
from repodoc.github.client import NOT_FOUND_MESSAGE, RATE_LIMITED_MESSAGE
from repodoc.models import FileEntry

REPO_PAYLOAD = {
    "name": "demo",
    "full_name": "alice/demo",
    "description": None,
    "html_url": "https://github.com/alice/demo",
    "language": "Python",
    "stargazers_count": 42,
    "forks_count": 3,
    "watchers_count": 5,
    "created_at": "2024-01-05T10:00:00Z",
    "owner": {"login": "alice", "avatar_url": "https://avatars.example/alice.png"},
    "license": None,
}


class FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class RecordingOpener:
    """Stands in for ``urlopen``; replies with queued payloads or raises queued errors."""

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.requests: List[Request] = []
        self.timeouts: List[float] = []

    def __call__(self, request: Request, timeout: float) -> FakeResponse:
        self.requests.append(request)
        self.timeouts.append(timeout)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, bytes):
            return FakeResponse(reply)
        return FakeResponse(json.dumps(reply).encode("utf-8"))


def _http_error(code: int, reason: str = "error") -> HTTPError:
    return HTTPError("https://api.github.com/x", code, reason, {}, io.BytesIO(b"{}"))  # type: ignore[arg-type]


def test_get_descriptor_sends_expected_request() -> None:
    opener = RecordingOpener(REPO_PAYLOAD)
    client = GitHubClient(token="secret", user_agent="repodoc-tests", timeout=7.0, opener=opener)

    descriptor = client.get_descriptor("alice", "demo")

    assert descriptor.full_name == "alice/demo"
    request = opener.requests[0]
    assert request.full_url == "https://api.github.com/repos/alice/demo"
    headers = {key.lower(): value for key, value in request.header_items()}
    assert headers["accept"] == "application/vnd.github.v3+json"
    assert headers["user-agent"] == "repodoc-tests"
    assert headers["authorization"] == "Bearer secret"
    assert opener.timeouts == [7.0]


def test_no_authorization_header_without_token() -> None:
    opener = RecordingOpener(REPO_PAYLOAD)
    GitHubClient(opener=opener).get_descriptor("alice", "demo")
    assert opener.requests[0].get_header("Authorization") is None


@pytest.mark.parametrize(
    ("error", "expected", "message"),
    [
        (_http_error(404, "Not Found"), NotFound, NOT_FOUND_MESSAGE),
        (_http_error(403, "Forbidden"), RateLimited, RATE_LIMITED_MESSAGE),
        (_http_error(500, "Server Error"), TransportError, "Failed to fetch repository: 500 Server Error"),
        (URLError("connection refused"), TransportError, "Failed to reach GitHub: connection refused"),
    ],
)
def test_descriptor_errors_are_mapped(error: Exception, expected: type, message: str) -> None:
    client = GitHubClient(opener=RecordingOpener(error))
    with pytest.raises(expected) as excinfo:
        client.get_descriptor("alice", "demo")
    assert str(excinfo.value) == message


def test_invalid_json_is_transport_error() -> None:
    client = GitHubClient(opener=RecordingOpener(b"<html>"))
    with pytest.raises(TransportError):
        client.get_descriptor("alice", "demo")


def test_incomplete_payload_is_transport_error() -> None:
    client = GitHubClient(opener=RecordingOpener({"name": "demo"}))
    with pytest.raises(TransportError):
        client.get_descriptor("alice", "demo")


def test_get_listing_parses_entries() -> None:
    opener = RecordingOpener(
        [
            {"name": "package.json", "path": "package.json", "type": "file", "size": 10},
            {"name": "src", "path": "src", "type": "dir", "size": 0},
            "junk",
        ]
    )
    client = GitHubClient("https://ghe.example/api/v3/", opener=opener)

    entries = client.get_listing("alice", "demo")

    assert entries == [
        FileEntry(name="package.json", path="package.json", type="file", size=10),
        FileEntry(name="src", path="src", type="dir", size=0),
    ]
    assert opener.requests[0].full_url == "https://ghe.example/api/v3/repos/alice/demo/contents"


def test_get_listing_degrades_to_empty() -> None:
    client = GitHubClient(opener=RecordingOpener(_http_error(404), {"message": "not a list"}))
    assert client.get_listing("alice", "demo") == []
    assert client.get_listing("alice", "demo") == []


def test_get_listing_strict_raises() -> None:
    client = GitHubClient(opener=RecordingOpener(_http_error(403), {"message": "not a list"}))
    with pytest.raises(RateLimited):
        client.get_listing("alice", "demo", strict=True)
    with pytest.raises(TransportError):
        client.get_listing("alice", "demo", strict=True)


def test_async_methods_delegate_to_executor() -> None:
    opener = RecordingOpener(REPO_PAYLOAD, [{"name": "go.mod"}])
    client = GitHubClient(opener=opener)

    async def scenario() -> tuple[str, list[FileEntry]]:
        descriptor = await client.fetch_descriptor("alice", "demo")
        entries = await client.fetch_listing("alice", "demo")
        return descriptor.name, entries

    name, entries = asyncio.run(scenario())
    assert name == "demo"
    assert [entry.name for entry in entries] == ["go.mod"]


def test_from_config() -> None:
    client = GitHubClient.from_config(
        GitHubConfig(base_url="http://localhost:1234", token="t", user_agent="ua", request_timeout=3)
    )
    assert client.base_url == "http://localhost:1234"
    assert client.token == "t"
    assert client.user_agent == "ua"
    assert client.timeout == 3
