"""Public error exports for gdrivewrap."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
