"""Core data models shared across repodoc components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class RepoIdentifier:
    """Owner/name pair addressing a single repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.full_name}"


@dataclass(frozen=True)
class Owner:
    """Account that owns a repository."""

    login: str
    avatar_url: str = ""


@dataclass(frozen=True)
class License:
    """License detected by the hosting provider."""

    name: str
    spdx_id: Optional[str] = None


@dataclass(frozen=True)
class RepositoryDescriptor:
    """Immutable repository metadata as returned by the provider."""

    name: str
    full_name: str
    html_url: str
    stargazers_count: int
    forks_count: int
    watchers_count: int
    created_at: str
    owner: Owner
    description: Optional[str] = None
    language: Optional[str] = None
    license: Optional[License] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RepositoryDescriptor":
        """Build a descriptor from a ``/repos/{owner}/{name}`` JSON object."""
        try:
            owner_data = payload["owner"]
            login = owner_data["login"]
            name = payload["name"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Repository payload is missing required field: {exc}") from exc
        if not login:
            raise ValueError("Repository payload has an empty owner login")

        license_data = payload.get("license")
        license_ = None
        if isinstance(license_data, Mapping) and license_data.get("name"):
            license_ = License(
                name=str(license_data["name"]),
                spdx_id=_as_optional_str(license_data.get("spdx_id")),
            )

        return cls(
            name=str(name),
            full_name=str(payload.get("full_name") or f"{login}/{name}"),
            html_url=str(payload.get("html_url") or f"https://github.com/{login}/{name}"),
            stargazers_count=_as_count(payload.get("stargazers_count")),
            forks_count=_as_count(payload.get("forks_count")),
            watchers_count=_as_count(payload.get("watchers_count")),
            created_at=str(payload.get("created_at") or ""),
            owner=Owner(login=str(login), avatar_url=str(owner_data.get("avatar_url") or "")),
            description=_as_optional_str(payload.get("description")),
            language=_as_optional_str(payload.get("language")),
            license=license_,
            updated_at=_as_optional_str(payload.get("updated_at")),
        )


@dataclass(frozen=True)
class FileEntry:
    """Top-level entry from a repository contents listing."""

    name: str
    path: str = ""
    type: str = "file"
    size: int = 0

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "FileEntry":
        name = str(payload.get("name") or "")
        return cls(
            name=name,
            path=str(payload.get("path") or name),
            type=str(payload.get("type") or "file"),
            size=_as_count(payload.get("size")),
        )


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


def _as_count(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0


__all__ = ["FileEntry", "License", "Owner", "RepoIdentifier", "RepositoryDescriptor"]
