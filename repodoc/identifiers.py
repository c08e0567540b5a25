"""Parse free-form repository references into owner/name pairs."""

from __future__ import annotations

import re

from .models import RepoIdentifier

_SEGMENT = r"[A-Za-z0-9._-]+"

# Checked in order; the first pattern that matches wins.
_PATTERNS = (
    re.compile(rf"^https?://{_SEGMENT}/(?P<owner>{_SEGMENT})/(?P<name>{_SEGMENT})$"),
    re.compile(rf"^[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+/(?P<owner>{_SEGMENT})/(?P<name>{_SEGMENT})$"),
    re.compile(rf"^(?P<owner>{_SEGMENT})/(?P<name>{_SEGMENT})$"),
)


class InvalidIdentifier(ValueError):
    """Raised when text cannot be read as a repository reference."""


def parse_identifier(raw: str) -> RepoIdentifier:
    """Return the owner/name pair addressed by ``raw``.

    Accepts ``https://host/owner/name``, ``host/owner/name`` and ``owner/name``,
    each with an optional trailing slash. A ``.git`` suffix on the name is dropped.
    """
    if not isinstance(raw, str):
        raise InvalidIdentifier("Repository reference must be text")
    cleaned = raw.strip()
    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    if not cleaned:
        raise InvalidIdentifier("Please enter a GitHub repository URL")

    for pattern in _PATTERNS:
        match = pattern.match(cleaned)
        if match is None:
            continue
        owner = match.group("owner")
        name = match.group("name")
        if name.endswith(".git"):
            name = name[: -len(".git")]
        if not name:
            break
        return RepoIdentifier(owner=owner, name=name)

    raise InvalidIdentifier(
        "Please enter a valid GitHub repository URL "
        "(e.g., username/repo or https://github.com/username/repo)"
    )


__all__ = ["InvalidIdentifier", "parse_identifier"]
