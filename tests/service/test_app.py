"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from repodoc.github import NotFound, TransportError
from repodoc.service import create_app
from repodoc.workflow import WorkflowController
from tests._fixtures.fetchers import StubFetcher, listing


@pytest.fixture
def fetcher() -> StubFetcher:
    return StubFetcher(entries=listing("requirements.txt"))


@pytest.fixture
def client(fetcher: StubFetcher) -> TestClient:
    app = create_app(lambda: WorkflowController(fetcher))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_initial_session_is_input(client: TestClient) -> None:
    data = client.get("/session").json()
    assert data["phase"] == "input"
    assert data["document"] is None


def test_submit_returns_document(client: TestClient) -> None:
    response = client.post("/session/submit", json={"identifier": "alice/demo"})
    assert response.status_code == 200
    data = response.json()
    assert data["phase"] == "document_ready"
    assert data["identifier"] == "alice/demo"
    assert data["repository"]["stargazers_count"] == 42
    assert "🐍 **Python Powered**" in data["document"]
    assert client.get("/session").json() == data


def test_invalid_identifier_reports_notice(client: TestClient) -> None:
    data = client.post("/session/submit", json={"identifier": "???"}).json()
    assert data["phase"] == "input"
    assert data["notice"]


def test_failed_fetch_then_retry(client: TestClient, fetcher: StubFetcher) -> None:
    fetcher.descriptor_error = NotFound("Repository not found.")
    failed = client.post("/session/submit", json={"identifier": "alice/demo"}).json()
    assert failed["phase"] == "failed"
    assert failed["error"] == "Repository not found."

    fetcher.descriptor_error = None
    recovered = client.post("/session/retry").json()
    assert recovered["phase"] == "document_ready"
    assert recovered["error"] is None


def test_regenerate_failure_keeps_document(client: TestClient, fetcher: StubFetcher) -> None:
    first = client.post("/session/submit", json={"identifier": "alice/demo"}).json()
    fetcher.listing_error = TransportError("down")

    data = client.post("/session/regenerate").json()

    assert data["phase"] == "document_ready"
    assert data["document"] == first["document"]
    assert data["notice"]


def test_start_over_resets_session(client: TestClient) -> None:
    client.post("/session/submit", json={"identifier": "alice/demo"})
    data = client.post("/session/start-over").json()
    assert data["phase"] == "input"
    assert data["identifier"] is None
    assert data["document"] is None


def test_undefined_transition_is_conflict(client: TestClient) -> None:
    response = client.post("/session/regenerate")
    assert response.status_code == 409
    assert response.json()["phase"] == "input"
