"""Tests for provider payload parsing."""

from __future__ import annotations

import pytest

from repodoc.models import FileEntry, License, RepositoryDescriptor


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "demo",
        "full_name": "alice/demo",
        "description": "Demo project",
        "html_url": "https://github.com/alice/demo",
        "language": "Python",
        "stargazers_count": 42,
        "forks_count": 3,
        "watchers_count": 5,
        "created_at": "2024-01-05T10:00:00Z",
        "updated_at": "2024-02-01T10:00:00Z",
        "owner": {"login": "alice", "avatar_url": "https://avatars.example/alice.png"},
        "license": {"key": "mit", "name": "MIT License", "spdx_id": "MIT"},
    }
    payload.update(overrides)
    return payload


def test_descriptor_from_api_maps_fields() -> None:
    descriptor = RepositoryDescriptor.from_api(_payload())

    assert descriptor.name == "demo"
    assert descriptor.full_name == "alice/demo"
    assert descriptor.owner.login == "alice"
    assert descriptor.stargazers_count == 42
    assert descriptor.license == License(name="MIT License", spdx_id="MIT")
    assert descriptor.updated_at == "2024-02-01T10:00:00Z"


def test_descriptor_from_api_handles_nulls() -> None:
    descriptor = RepositoryDescriptor.from_api(
        _payload(description=None, language=None, license=None, full_name=None, html_url=None)
    )

    assert descriptor.description is None
    assert descriptor.language is None
    assert descriptor.license is None
    assert descriptor.full_name == "alice/demo"
    assert descriptor.html_url == "https://github.com/alice/demo"


def test_descriptor_from_api_requires_owner_login() -> None:
    with pytest.raises(ValueError):
        RepositoryDescriptor.from_api(_payload(owner={"login": ""}))
    payload = _payload()
    del payload["owner"]
    with pytest.raises(ValueError):
        RepositoryDescriptor.from_api(payload)


def test_file_entry_from_api_keeps_name() -> None:
    entry = FileEntry.from_api({"name": "Cargo.toml", "path": "Cargo.toml", "type": "file", "size": 120, "sha": "x"})
    assert entry == FileEntry(name="Cargo.toml", path="Cargo.toml", type="file", size=120)
