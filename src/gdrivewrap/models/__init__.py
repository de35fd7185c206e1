"""Public model exports for gdrivewrap."""

from __future__ import annotations

from .remote_entry import EntryKind, RemoteEntry, ResolutionResult
from .results import SyncResult

__all__ = [
    "EntryKind",
    "RemoteEntry",
    "ResolutionResult",
    "SyncResult",
]
