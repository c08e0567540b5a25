"""Deterministic README generation from repository metadata."""

from .builder import DocumentBuilder, generate_document
from .constants import Ecosystem, Language
from .sections import GenerationContext
from .signals import EcosystemSignal

__all__ = [
    "DocumentBuilder",
    "Ecosystem",
    "EcosystemSignal",
    "GenerationContext",
    "Language",
    "generate_document",
]
