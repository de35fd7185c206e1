"""Local filesystem checks used before put/get/sync."""

from __future__ import annotations

import os
from typing import Optional

from gdrivewrap.errors import InvalidArgumentError
from gdrivewrap.models import EntryKind


def local_kind(path: str) -> Optional[EntryKind]:
    """Return FILE/DIRECTORY for an existing local path, None if missing."""
    if os.path.isdir(path):
        return EntryKind.DIRECTORY
    if os.path.exists(path):
        return EntryKind.FILE
    return None


def strip_trailing_separator(path: str) -> str:
    """Drop one trailing separator ("/" or os.sep), keeping a bare root."""
    for sep in {"/", os.sep}:
        if len(path) > 1 and path.endswith(sep):
            return path[: -len(sep)]
    return path


def local_base_name(path: str) -> str:
    """Name of the file/directory a local path points to ("a/b/" -> "b")."""
    return os.path.basename(os.path.normpath(path))


def validate_local_directory(path: str, what: str) -> str:
    """Return the absolute path of an existing local directory."""
    if not isinstance(path, str) or not path.strip():
        raise InvalidArgumentError(f"{what} must be a non-empty string")
    if local_kind(path) is not EntryKind.DIRECTORY:
        raise InvalidArgumentError(
            f"{path} does not exist or is not a directory. Nothing to sync?",
            details={"path": path},
        )
    return os.path.abspath(path)


def validate_local_path(path: str, what: str) -> str:
    """Return the absolute form of a local path (which need not exist)."""
    if not isinstance(path, str) or not path.strip():
        raise InvalidArgumentError(f"{what} must be a non-empty string")
    return os.path.abspath(strip_trailing_separator(path))
