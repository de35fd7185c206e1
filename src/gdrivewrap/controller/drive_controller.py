"""gdrive CLI controller (internal use only)."""

from __future__ import annotations

from typing import Any, Optional

from gdrivewrap.config import ToolConfig
from gdrivewrap.errors import InvalidArgumentError, UnsupportedFormatError
from gdrivewrap.models import EntryKind, RemoteEntry
from gdrivewrap.util.time import parse_listing_time

from .invocation import Invocation, Subcommand
from .output_parser import parse_output
from .queries import build_parent_query, build_search_query
from .runner import CommandRunner

# gdrive lists 30 items and truncates names to 40 characters by default.
_LIST_FLAGS: tuple[str, ...] = ("--max", "0", "--name-width", "0")


class GoogleDriveController:
    """
    One method per gdrive subcommand (internal only).

    Notes:
        - Every call starts a fresh gdrive process; nothing is cached.
        - Results are parsed into RemoteEntry / dict / log text.
    """

    def __init__(self, config: ToolConfig) -> None:
        self._runner = CommandRunner(config)

    @classmethod
    def from_runner(cls, runner: Any) -> "GoogleDriveController":
        """Create controller with an injected runner (useful for tests)."""
        obj = cls.__new__(cls)
        obj._runner = runner
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def about(self) -> dict[str, str]:
        return self._call(Invocation(Subcommand.ABOUT))  # type: ignore[return-value]

    def info(self, file_id: str) -> dict[str, str]:
        _require(file_id, "file_id")
        record = dict(self._call(Invocation(Subcommand.INFO, args=(file_id,))))
        record.setdefault("id", file_id)
        return record

    def describe(self, file_id: str) -> RemoteEntry:
        """Like info(), converted to a RemoteEntry carrying the raw record."""
        return _info_to_remote_entry(self.info(file_id))

    def find(self, query: str) -> list[RemoteEntry]:
        _require(query, "query")
        return self._call(  # type: ignore[return-value]
            Invocation(Subcommand.LIST, flags=_LIST_FLAGS + ("--query", query))
        )

    def list_children(self, parent_id: str) -> list[RemoteEntry]:
        _require(parent_id, "parent_id")
        return self.find(build_parent_query(parent_id))

    def search(self, substring: str, *, include_trashed: bool = False) -> list[RemoteEntry]:
        return self.find(build_search_query(substring, include_trashed=include_trashed))

    def sync_roots(self) -> list[RemoteEntry]:
        return self._call(Invocation(Subcommand.SYNC_LIST))  # type: ignore[return-value]

    def mkdir(self, name: str, parent_id: str) -> str:
        """Create a directory and return its id."""
        _require(name, "name")
        _require(parent_id, "parent_id")
        record = self._call(
            Invocation(Subcommand.MKDIR, flags=("--parent", parent_id), args=(name,))
        )
        return record["id"]  # type: ignore[index]

    def upload(
        self,
        local_path: str,
        *,
        parent_id: Optional[str] = None,
        name: Optional[str] = None,
        recursive: bool = False,
    ) -> str:
        _require(local_path, "local_path")
        flags: list[str] = []
        if recursive:
            flags.append("--recursive")
        if parent_id:
            flags.extend(["--parent", parent_id])
        if name:
            flags.extend(["--name", name])
        return self._log(Invocation(Subcommand.UPLOAD, flags=tuple(flags), args=(local_path,)))

    def update(self, file_id: str, local_path: str) -> str:
        _require(file_id, "file_id")
        _require(local_path, "local_path")
        return self._log(Invocation(Subcommand.UPDATE, args=(file_id, local_path)))

    def download(
        self,
        file_id: str,
        local_path: str,
        *,
        force: bool = False,
        recursive: bool = False,
    ) -> str:
        _require(file_id, "file_id")
        _require(local_path, "local_path")
        flags: list[str] = []
        if force:
            flags.append("--force")
        if recursive:
            flags.append("--recursive")
        flags.extend(["--path", local_path])
        return self._log(Invocation(Subcommand.DOWNLOAD, flags=tuple(flags), args=(file_id,)))

    def sync_upload(self, local_path: str, target_id: str, *, dry_run: bool = False) -> str:
        _require(local_path, "local_path")
        _require(target_id, "target_id")
        flags = ("--dry-run",) if dry_run else ()
        return self._log(
            Invocation(Subcommand.SYNC_UPLOAD, flags=flags, args=(local_path, target_id))
        )

    def sync_download(self, target_id: str, local_path: str, *, dry_run: bool = False) -> str:
        _require(target_id, "target_id")
        _require(local_path, "local_path")
        flags = ("--dry-run",) if dry_run else ()
        return self._log(
            Invocation(Subcommand.SYNC_DOWNLOAD, flags=flags, args=(target_id, local_path))
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _call(self, invocation: Invocation) -> Any:
        output = self._runner.run(invocation)
        return parse_output(output, invocation.subcommand)

    def _log(self, invocation: Invocation) -> str:
        return self._call(invocation)["log"]


def _require(value: object, field_name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{field_name} must be a non-empty string")


def _info_to_remote_entry(record: dict[str, str]) -> RemoteEntry:
    file_id = record.get("id", "")
    if not file_id:
        raise UnsupportedFormatError(
            "gdrive info output has no Id",
            details={"command": Subcommand.INFO.value, "record": record},
        )

    size = None
    units = ""
    size_parts = record.get("size", "").split()
    if size_parts:
        try:
            size = float(size_parts[0])
        except ValueError:
            size = None
        else:
            units = size_parts[1] if len(size_parts) > 1 else "B"

    created_at = None
    if record.get("created"):
        try:
            created_at = parse_listing_time(record["created"])
        except ValueError:
            created_at = None

    return RemoteEntry(
        id=file_id,
        name=record.get("name", ""),
        kind=EntryKind.from_mime(record.get("mime")),
        size=size,
        units=units,
        created_at=created_at,
        details=dict(record),
    )
