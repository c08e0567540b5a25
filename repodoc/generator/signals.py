"""Signals derived from a repository's top-level file listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable

from ..models import FileEntry
from .constants import ECOSYSTEM_PRIORITY, Ecosystem


@dataclass(frozen=True)
class EcosystemSignal:
    """Facts about a listing that steer prerequisite, install and stack copy."""

    has_package_json: bool = False
    has_requirements_txt: bool = False
    has_gemfile: bool = False
    has_cargo_toml: bool = False
    has_go_mod: bool = False
    has_test_files: bool = False
    has_docker: bool = False
    has_dockerfile: bool = False
    extensions: FrozenSet[str] = frozenset()

    @classmethod
    def from_listing(cls, listing: Iterable[FileEntry]) -> "EcosystemSignal":
        names = [entry.name for entry in listing]
        present = set(names)
        return cls(
            has_package_json=Ecosystem.NODE.manifest in present,
            has_requirements_txt=Ecosystem.PYTHON.manifest in present,
            has_gemfile=Ecosystem.RUBY.manifest in present,
            has_cargo_toml=Ecosystem.RUST.manifest in present,
            has_go_mod=Ecosystem.GO.manifest in present,
            has_test_files=any("test" in name for name in names),
            # Exact, case-sensitive names only; "dockerfile" is not recognised.
            has_docker="docker" in present or "Dockerfile" in present,
            has_dockerfile="Dockerfile" in present,
            extensions=frozenset(ext for ext in (_extension(name) for name in names) if ext),
        )

    def detected(self, ecosystem: Ecosystem) -> bool:
        return {
            Ecosystem.NODE: self.has_package_json,
            Ecosystem.PYTHON: self.has_requirements_txt,
            Ecosystem.RUBY: self.has_gemfile,
            Ecosystem.RUST: self.has_cargo_toml,
            Ecosystem.GO: self.has_go_mod,
        }.get(ecosystem, False)

    @property
    def ecosystem(self) -> Ecosystem:
        """Highest-priority ecosystem present, or ``Ecosystem.UNKNOWN``."""
        for candidate in ECOSYSTEM_PRIORITY:
            if self.detected(candidate):
                return candidate
        return Ecosystem.UNKNOWN


def _extension(name: str) -> str:
    # Text after the last dot, or the whole name when there is no dot.
    return name.rsplit(".", 1)[-1].lower()


__all__ = ["EcosystemSignal"]
