"""Exception hierarchy for gdrivewrap."""

from __future__ import annotations

from typing import Any, Optional


class GDriveWrapError(Exception):
    """
    Base exception for gdrivewrap.

    Attributes:
        details: Optional structured information (e.g., command line, path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(GDriveWrapError):
    """Raised when caller arguments are invalid (missing local source, empty name)."""


class InvalidStateError(GDriveWrapError):
    """Raised when the wrapper is used in an invalid state (e.g., no config)."""


class PathNotFoundError(GDriveWrapError):
    """Raised when a virtual path (or one of its segments) does not exist on Drive."""


class AlreadyExistsError(GDriveWrapError):
    """Raised when a destination exists and overwrite was not requested."""


class TypeMismatchError(GDriveWrapError):
    """Raised when a directory is found where a file is expected, or vice versa."""


class NotASyncRootError(GDriveWrapError):
    """Raised when a sync target exists but is not registered as a sync root."""


class UnsupportedFormatError(GDriveWrapError):
    """Raised when gdrive output cannot be converted for the given command."""


class ExternalToolError(GDriveWrapError):
    """
    Raised when the gdrive executable fails.

    details carries "command", "returncode", "stdout" and "stderr".
    """

    @property
    def command(self) -> str:
        return str(self.details.get("command", ""))

    @property
    def output(self) -> str:
        stdout = self.details.get("stdout") or ""
        stderr = self.details.get("stderr") or ""
        return f"{stdout}{stderr}"


class CredentialError(GDriveWrapError):
    """Raised when the gdrive token file cannot be read."""
