"""Human-readable repository summaries shown before the generated README."""

from __future__ import annotations

from datetime import datetime
from typing import List

from .models import RepositoryDescriptor


def format_count(value: int) -> str:
    """Abbreviate counts of 1000 or more, e.g. ``1234`` becomes ``1.2k``."""
    if value >= 1000:
        return f"{value / 1000:.1f}k"
    return str(value)


def format_date(value: str) -> str:
    """Render an ISO-8601 timestamp as ``Month D, YYYY``; unparsable input is returned as-is."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def describe_repository(descriptor: RepositoryDescriptor) -> str:
    lines: List[str] = [descriptor.full_name]
    if descriptor.description:
        lines.append(descriptor.description)
    stats = [
        f"★ {format_count(descriptor.stargazers_count)} stars",
        f"⑂ {format_count(descriptor.forks_count)} forks",
        f"◉ {format_count(descriptor.watchers_count)} watchers",
    ]
    lines.append("  ".join(stats))
    details = [f"owner: {descriptor.owner.login}"]
    if descriptor.language:
        details.append(f"language: {descriptor.language}")
    if descriptor.license:
        details.append(f"license: {descriptor.license.spdx_id or descriptor.license.name}")
    if descriptor.created_at:
        details.append(f"created: {format_date(descriptor.created_at)}")
    lines.append(", ".join(details))
    lines.append(descriptor.html_url)
    return "\n".join(lines)


__all__ = ["describe_repository", "format_count", "format_date"]
