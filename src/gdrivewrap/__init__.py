"""gdrivewrap public API."""

from __future__ import annotations

from gdrivewrap.auth import CredentialStore
from gdrivewrap.config import ToolConfig, default_executable
from gdrivewrap.controller import (
    CommandRunner,
    GoogleDriveController,
    Invocation,
    Subcommand,
    parse_output,
)
from gdrivewrap.errors import (
    AlreadyExistsError,
    CredentialError,
    ExternalToolError,
    GDriveWrapError,
    InvalidArgumentError,
    InvalidStateError,
    NotASyncRootError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedFormatError,
)
from gdrivewrap.manager import GoogleDriveWrapper
from gdrivewrap.models import EntryKind, RemoteEntry, ResolutionResult, SyncResult
from gdrivewrap.plan import Action, TransferIntent, decide_copy, decide_download
from gdrivewrap.resolve import PathResolver

__all__ = [
    # High-level
    "GoogleDriveWrapper",
    "ToolConfig",
    "default_executable",
    "CredentialStore",
    # Command layer
    "GoogleDriveController",
    "CommandRunner",
    "Invocation",
    "Subcommand",
    "parse_output",
    # Resolution / decisions
    "PathResolver",
    "Action",
    "TransferIntent",
    "decide_copy",
    "decide_download",
    # Models
    "EntryKind",
    "RemoteEntry",
    "ResolutionResult",
    "SyncResult",
    # Errors
    "GDriveWrapError",
    "InvalidArgumentError",
    "InvalidStateError",
    "PathNotFoundError",
    "AlreadyExistsError",
    "TypeMismatchError",
    "NotASyncRootError",
    "UnsupportedFormatError",
    "ExternalToolError",
    "CredentialError",
]
