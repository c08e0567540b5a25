"""Assembles README documents from repository metadata."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..models import FileEntry, RepositoryDescriptor
from .sections import SECTION_RENDERERS, GenerationContext, SectionRenderer


class DocumentBuilder:
    """Renders a fixed, ordered pipeline of sections into one Markdown document.

    The builder holds no per-document state, so one instance can serve any
    number of sessions concurrently.
    """

    SEPARATOR = "\n\n"

    def __init__(
        self, renderers: Optional[Sequence[Tuple[str, SectionRenderer]]] = None
    ) -> None:
        self._renderers: Tuple[Tuple[str, SectionRenderer], ...] = tuple(
            renderers if renderers is not None else SECTION_RENDERERS
        )

    @property
    def section_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._renderers)

    def render_sections(
        self,
        descriptor: RepositoryDescriptor,
        listing: Iterable[FileEntry] = (),
    ) -> Dict[str, str]:
        """Return each rendered fragment keyed by section name, in document order."""
        ctx = GenerationContext.create(descriptor, tuple(listing))
        return {name: renderer(ctx) for name, renderer in self._renderers}

    def build(
        self,
        descriptor: RepositoryDescriptor,
        listing: Iterable[FileEntry] = (),
    ) -> str:
        fragments = self.render_sections(descriptor, listing)
        return self.SEPARATOR.join(fragments.values())


_DEFAULT_BUILDER = DocumentBuilder()


def generate_document(
    descriptor: RepositoryDescriptor, listing: Iterable[FileEntry] = ()
) -> str:
    """Render the README for ``descriptor`` using the default section pipeline."""
    return _DEFAULT_BUILDER.build(descriptor, listing)


__all__ = ["DocumentBuilder", "generate_document"]
