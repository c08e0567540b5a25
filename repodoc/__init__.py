"""Generate README documents from GitHub repository metadata."""

from .generator import DocumentBuilder, generate_document
from .identifiers import InvalidIdentifier, parse_identifier
from .models import FileEntry, License, Owner, RepoIdentifier, RepositoryDescriptor
from .workflow import Phase, WorkflowController, WorkflowState

__all__ = [
    "DocumentBuilder",
    "FileEntry",
    "InvalidIdentifier",
    "License",
    "Owner",
    "Phase",
    "RepoIdentifier",
    "RepositoryDescriptor",
    "WorkflowController",
    "WorkflowState",
    "generate_document",
    "parse_identifier",
]
