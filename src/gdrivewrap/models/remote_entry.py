"""Data models for Drive items as reported by gdrive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from gdrivewrap.util.ids import ROOT_ID, is_not_found_id
from gdrivewrap.util.mime import DIRECTORY_CODE, FILE_CODE, is_folder

# gdrive prints sizes with decimal prefixes.
_UNIT_FACTORS: dict[str, int] = {
    "B": 1,
    "KB": 1000,
    "MB": 1000**2,
    "GB": 1000**3,
    "TB": 1000**4,
    "PB": 1000**5,
    "EB": 1000**6,
}


class EntryKind(str, Enum):
    """Kind of a Drive item."""

    FILE = "file"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, code: str) -> "EntryKind":
        """Map the three-letter type code of `gdrive list` output."""
        code = code.strip().lower()
        if code == DIRECTORY_CODE:
            return cls.DIRECTORY
        if code == FILE_CODE:
            return cls.FILE
        return cls.UNKNOWN

    @classmethod
    def from_mime(cls, mime_type: Optional[str]) -> "EntryKind":
        """Map the Mime field of `gdrive info` output."""
        if not mime_type:
            return cls.UNKNOWN
        return cls.DIRECTORY if is_folder(mime_type) else cls.FILE


@dataclass(frozen=True, slots=True)
class RemoteEntry:
    """
    A Drive item parsed from gdrive output.

    Notes:
        - An empty id is the not-found sentinel: the location was resolved
          but nothing exists there yet. It is never a valid update target.
        - details holds the key/value record of `gdrive info` when it was
          requested (keys lower-cased, spaces removed).
    """

    id: str
    name: str
    kind: EntryKind = EntryKind.UNKNOWN

    size: Optional[float] = None
    units: str = ""
    created_at: Optional[datetime] = None
    details: dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def not_found(cls, name: str) -> "RemoteEntry":
        return cls(id="", name=name)

    @classmethod
    def root(cls) -> "RemoteEntry":
        return cls(id=ROOT_ID, name="", kind=EntryKind.DIRECTORY)

    @property
    def exists(self) -> bool:
        return not is_not_found_id(self.id)

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.exists and not self.is_directory

    @property
    def size_bytes(self) -> Optional[int]:
        """Approximate size in bytes (gdrive rounds what it prints)."""
        if self.size is None:
            return None
        factor = _UNIT_FACTORS.get(self.units.upper(), 1 if not self.units else None)
        if factor is None:
            return None
        return int(round(self.size * factor))


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """
    Outcome of resolving a virtual path.

    Attributes:
        entry: The resolved item, or the not-found sentinel (empty id).
        parent_id: Id of the directory that holds entry.
        listing: Contents of entry when entry is a directory; otherwise the
            contents of parent_id (entry's siblings).
        trailing_separator: Whether the path was written with a trailing "/".
    """

    entry: RemoteEntry
    parent_id: str
    listing: tuple[RemoteEntry, ...] = ()
    trailing_separator: bool = False

    @property
    def found(self) -> bool:
        return self.entry.exists

    @property
    def listing_id(self) -> str:
        """Id of the directory whose contents are in listing."""
        if self.entry.exists and self.entry.is_directory:
            return self.entry.id
        return self.parent_id
