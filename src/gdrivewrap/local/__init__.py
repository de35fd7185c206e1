"""Local filesystem helpers for gdrivewrap."""

from __future__ import annotations

from .validators import (
    local_base_name,
    local_kind,
    strip_trailing_separator,
    validate_local_directory,
    validate_local_path,
)

__all__ = [
    "local_kind",
    "local_base_name",
    "strip_trailing_separator",
    "validate_local_directory",
    "validate_local_path",
]
