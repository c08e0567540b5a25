"""Session state machine driving fetch, generate and present.

State changes are expressed as events applied by :func:`transition`, a pure
function of ``(state, event)``. :class:`WorkflowController` performs the I/O,
feeds the resulting events through ``transition`` and owns the only mutable
reference to the current :class:`WorkflowState`.

Every submit, retry, regenerate and start-over bumps ``generation``. Completion
events carry the generation they were started under and are dropped when it no
longer matches, so a late response can never overwrite newer state.
"""

from __future__ import annotations

import asyncio
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from .generator import generate_document
from .github.base import DescriptorFetcher, FetchError
from .identifiers import InvalidIdentifier, parse_identifier
from .logging import get_logger
from .models import FileEntry, RepoIdentifier, RepositoryDescriptor

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
REGENERATE_FAILED_MESSAGE = "Failed to regenerate README. Please try again."


class Phase(Enum):
    INPUT = "input"
    FETCHING_METADATA = "fetching_metadata"
    METADATA_READY = "metadata_ready"
    GENERATING_DOCUMENT = "generating_document"
    DOCUMENT_READY = "document_ready"
    FAILED = "failed"


class InvalidTransition(RuntimeError):
    """Raised when an event is not defined for the current phase."""


@dataclass(frozen=True)
class WorkflowState:
    """Read-only snapshot of a session."""

    phase: Phase = Phase.INPUT
    submitted: Optional[str] = None
    identifier: Optional[RepoIdentifier] = None
    descriptor: Optional[RepositoryDescriptor] = None
    document: Optional[str] = None
    error: Optional[str] = None
    notice: Optional[str] = None
    generation: int = 0

    @property
    def busy(self) -> bool:
        return self.phase in _IN_FLIGHT

    def to_dict(self) -> Dict[str, Any]:
        """Projection used by presentation layers."""
        return {
            "phase": self.phase.value,
            "submitted": self.submitted,
            "identifier": self.identifier.full_name if self.identifier else None,
            "repository": asdict(self.descriptor) if self.descriptor else None,
            "document": self.document,
            "error": self.error,
            "notice": self.notice,
            "generation": self.generation,
        }


_IN_FLIGHT = frozenset(
    {Phase.FETCHING_METADATA, Phase.METADATA_READY, Phase.GENERATING_DOCUMENT}
)


# Events issued by the session owner.


@dataclass(frozen=True)
class Submitted:
    raw: str
    identifier: RepoIdentifier


@dataclass(frozen=True)
class SubmissionRejected:
    message: str


@dataclass(frozen=True)
class RetryRequested:
    pass


@dataclass(frozen=True)
class RegenerateRequested:
    pass


@dataclass(frozen=True)
class StartedOver:
    pass


# Completion events; ``generation`` is the one captured when the work started.


@dataclass(frozen=True)
class DescriptorFetched:
    generation: int
    descriptor: RepositoryDescriptor


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    message: str


@dataclass(frozen=True)
class GenerationStarted:
    generation: int


@dataclass(frozen=True)
class DocumentGenerated:
    generation: int
    document: str


@dataclass(frozen=True)
class RegenerateFailed:
    generation: int
    message: str


Event = Union[
    Submitted,
    SubmissionRejected,
    RetryRequested,
    RegenerateRequested,
    StartedOver,
    DescriptorFetched,
    FetchFailed,
    GenerationStarted,
    DocumentGenerated,
    RegenerateFailed,
]

_COMPLETIONS = (DescriptorFetched, FetchFailed, GenerationStarted, DocumentGenerated, RegenerateFailed)


def is_stale(state: WorkflowState, event: Event) -> bool:
    return isinstance(event, _COMPLETIONS) and event.generation != state.generation


def _require(state: WorkflowState, event: Event, *phases: Phase) -> None:
    if state.phase not in phases:
        raise InvalidTransition(
            f"{type(event).__name__} is not valid while {state.phase.value}"
        )


def transition(state: WorkflowState, event: Event) -> WorkflowState:
    """Return the state that follows ``state`` once ``event`` is applied.

    Stale completion events return ``state`` unchanged.
    """
    if is_stale(state, event):
        return state

    if isinstance(event, StartedOver):
        return WorkflowState(generation=state.generation + 1)

    if isinstance(event, Submitted):
        return WorkflowState(
            phase=Phase.FETCHING_METADATA,
            submitted=event.raw,
            identifier=event.identifier,
            generation=state.generation + 1,
        )

    if isinstance(event, SubmissionRejected):
        return replace(state, notice=event.message)

    if isinstance(event, RetryRequested):
        _require(state, event, Phase.FAILED)
        if state.identifier is None:
            raise InvalidTransition("Nothing to retry; submit a repository first")
        return replace(
            state,
            phase=Phase.FETCHING_METADATA,
            error=None,
            notice=None,
            generation=state.generation + 1,
        )

    if isinstance(event, RegenerateRequested):
        _require(state, event, Phase.DOCUMENT_READY)
        return replace(
            state,
            phase=Phase.GENERATING_DOCUMENT,
            notice=None,
            generation=state.generation + 1,
        )

    if isinstance(event, DescriptorFetched):
        _require(state, event, Phase.FETCHING_METADATA)
        return replace(state, phase=Phase.METADATA_READY, descriptor=event.descriptor)

    if isinstance(event, FetchFailed):
        _require(state, event, Phase.FETCHING_METADATA)
        return replace(state, phase=Phase.FAILED, error=event.message)

    if isinstance(event, GenerationStarted):
        _require(state, event, Phase.METADATA_READY)
        return replace(state, phase=Phase.GENERATING_DOCUMENT)

    if isinstance(event, DocumentGenerated):
        _require(state, event, Phase.GENERATING_DOCUMENT)
        return replace(state, phase=Phase.DOCUMENT_READY, document=event.document, error=None)

    if isinstance(event, RegenerateFailed):
        _require(state, event, Phase.GENERATING_DOCUMENT)
        return replace(state, phase=Phase.DOCUMENT_READY, notice=event.message)

    raise InvalidTransition(f"Unknown event {event!r}")


Generator = Callable[[RepositoryDescriptor, Iterable[FileEntry]], str]


class WorkflowController:
    """Runs one session's fetch/generate sequence on top of :func:`transition`.

    Callers serialise retry and regenerate; a new submit or start over may
    arrive at any time and supersedes whatever is in flight.
    """

    def __init__(
        self,
        fetcher: DescriptorFetcher,
        *,
        pacing_delay: float = 0.0,
        generator: Generator = generate_document,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.fetcher = fetcher
        self.pacing_delay = pacing_delay
        self._generator = generator
        self._sleep = sleep
        self._state = WorkflowState()
        self.logger = get_logger("workflow")

    @property
    def state(self) -> WorkflowState:
        return self._state

    async def submit(self, raw: str) -> WorkflowState:
        """Start a new session run for ``raw``; invalid input only records a notice."""
        try:
            identifier = parse_identifier(raw)
        except InvalidIdentifier as exc:
            self.logger.warning("Rejected repository reference %r: %s", raw, exc)
            self._apply(SubmissionRejected(str(exc)))
            return self._state

        self._apply(Submitted(raw=raw, identifier=identifier))
        return await self._run(identifier, self._state.generation)

    async def retry(self) -> WorkflowState:
        """Re-run the pipeline for the last submitted repository after a failure."""
        self._apply(RetryRequested())
        identifier = self._state.identifier
        assert identifier is not None
        return await self._run(identifier, self._state.generation)

    async def regenerate(self) -> WorkflowState:
        """Rebuild the document for the stored descriptor with a fresh listing.

        A failed listing fetch keeps the previous document and sets ``notice``.
        """
        self._apply(RegenerateRequested())
        generation = self._state.generation
        identifier = self._state.identifier
        descriptor = self._state.descriptor
        assert identifier is not None and descriptor is not None

        try:
            listing = await self.fetcher.fetch_listing(identifier.owner, identifier.name, strict=True)
        except FetchError as exc:
            self.logger.warning("Regeneration listing fetch failed: %s", exc)
            self._apply(RegenerateFailed(generation, REGENERATE_FAILED_MESSAGE))
            return self._state
        except Exception:  # pragma: no cover - defensive guard
            self.logger.exception("Unexpected failure while regenerating %s", identifier.full_name)
            self._apply(RegenerateFailed(generation, REGENERATE_FAILED_MESSAGE))
            return self._state

        if self._state.generation != generation:
            return self._discard(generation)
        document = self._generator(descriptor, listing)
        await self._pace()
        self._apply(DocumentGenerated(generation, document))
        return self._state

    def start_over(self) -> WorkflowState:
        """Return to a blank input state; work still in flight is discarded."""
        self._apply(StartedOver())
        return self._state

    async def _run(self, identifier: RepoIdentifier, generation: int) -> WorkflowState:
        self.logger.info("Fetching repository data for %s", identifier.full_name)
        try:
            descriptor = await self.fetcher.fetch_descriptor(identifier.owner, identifier.name)
        except FetchError as exc:
            self.logger.warning("Repository fetch failed for %s: %s", identifier.full_name, exc)
            self._apply(FetchFailed(generation, str(exc) or UNEXPECTED_ERROR_MESSAGE))
            return self._state
        except Exception:  # pragma: no cover - defensive guard
            self.logger.exception("Unexpected failure fetching %s", identifier.full_name)
            self._apply(FetchFailed(generation, UNEXPECTED_ERROR_MESSAGE))
            return self._state

        self._apply(DescriptorFetched(generation, descriptor))
        if self._state.generation != generation:
            return self._discard(generation)

        listing = await self._fetch_listing_lenient(identifier)
        if self._state.generation != generation:
            return self._discard(generation)

        self._apply(GenerationStarted(generation))
        document = self._generator(descriptor, listing)
        await self._pace()
        self._apply(DocumentGenerated(generation, document))
        if self._state.generation == generation:
            self.logger.info("README generated for %s", identifier.full_name)
        return self._state

    async def _fetch_listing_lenient(self, identifier: RepoIdentifier) -> List[FileEntry]:
        try:
            return list(await self.fetcher.fetch_listing(identifier.owner, identifier.name))
        except Exception as exc:
            self.logger.warning(
                "Listing fetch failed for %s; continuing with an empty listing: %s",
                identifier.full_name,
                exc,
            )
            return []

    async def _pace(self) -> None:
        if self.pacing_delay > 0:
            await self._sleep(self.pacing_delay)

    def _apply(self, event: Event) -> None:
        previous = self._state
        if is_stale(previous, event):
            self._discard(getattr(event, "generation", -1))
            return
        self._state = transition(previous, event)
        self.logger.debug(
            "%s: %s -> %s", type(event).__name__, previous.phase.value, self._state.phase.value
        )

    def _discard(self, generation: int) -> WorkflowState:
        self.logger.debug(
            "Discarding stale result from generation %d (current %d)",
            generation,
            self._state.generation,
        )
        return self._state


__all__ = [
    "DescriptorFetched",
    "DocumentGenerated",
    "Event",
    "FetchFailed",
    "GenerationStarted",
    "InvalidTransition",
    "Phase",
    "RegenerateFailed",
    "RegenerateRequested",
    "RetryRequested",
    "StartedOver",
    "SubmissionRejected",
    "Submitted",
    "WorkflowController",
    "WorkflowState",
    "is_stale",
    "transition",
]
