"""GoogleDriveWrapper: path-based Drive operations on top of gdrive."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, Optional

from gdrivewrap.auth import CredentialStore
from gdrivewrap.config import ToolConfig
from gdrivewrap.controller import GoogleDriveController
from gdrivewrap.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    InvalidStateError,
    NotASyncRootError,
    PathNotFoundError,
    TypeMismatchError,
)
from gdrivewrap.local import (
    local_base_name,
    local_kind,
    validate_local_directory,
    validate_local_path,
)
from gdrivewrap.models import EntryKind, RemoteEntry, ResolutionResult, SyncResult
from gdrivewrap.plan import Action, TransferIntent, decide_copy, decide_download
from gdrivewrap.resolve import PathResolver, find_by_name

if TYPE_CHECKING:
    from google.oauth2.credentials import Credentials

logger = logging.getLogger(__name__)


class GoogleDriveWrapper:
    """
    High-level access to Google Drive through the gdrive executable.

    Every operation re-resolves its paths against live listings; nothing is
    cached between calls. Errors propagate immediately and multi-step
    operations stop at the first failure.
    """

    def __init__(self, config: ToolConfig) -> None:
        self._config: Optional[ToolConfig] = config
        self._controller = GoogleDriveController(config)
        self._resolver = PathResolver(self._controller)

    @classmethod
    def from_controller(cls, controller: Any) -> "GoogleDriveWrapper":
        """Create wrapper with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._config = None
        obj._controller = controller
        obj._resolver = PathResolver(controller)
        return obj

    # ----------------------------
    # Account
    # ----------------------------
    def about(self) -> dict[str, str]:
        """Information on the current connection to Google Drive."""
        return self._controller.about()

    def token(self) -> dict[str, Any]:
        """The raw gdrive token record (read-only)."""
        return self._credential_store().load()

    def credentials(self) -> "Credentials":
        """google-auth Credentials built from gdrive's token file (no refresh)."""
        return self._credential_store().credentials()

    # ----------------------------
    # Lookup
    # ----------------------------
    def resolve(self, path: str) -> ResolutionResult:
        return self._resolver.resolve(path)

    def info(self, path: str) -> tuple[RemoteEntry, list[RemoteEntry]]:
        """
        Describe the item at path.

        Returns:
            (entry, listing): entry is built from `gdrive info` (the raw
            record in details), or the not-found sentinel (empty id) if
            nothing exists at path yet; listing is the directory contents
            when entry is a directory, otherwise entry's siblings.
        """
        result = self._resolver.resolve(path)
        entry = result.entry
        if result.found:
            entry = self._controller.describe(entry.id)
        return entry, list(result.listing)

    def list_directory(self, path: str) -> tuple[list[RemoteEntry], str]:
        """
        List a directory.

        Returns:
            (entries, parent_id): the directory's contents and its id. For a
            path naming a file (or nothing) this is ([entry], holding dir id).
        """
        result = self._resolver.resolve(path)
        if result.found and result.entry.is_directory:
            return list(result.listing), result.listing_id
        return [result.entry], result.parent_id

    def search(self, substring: str, include_trashed: bool = False) -> list[RemoteEntry]:
        """All items whose name contains substring."""
        if not isinstance(substring, str):
            raise InvalidArgumentError("substring must be a string")
        return self._controller.search(substring, include_trashed=include_trashed)

    def list_sync_roots(self) -> list[RemoteEntry]:
        """Directories on Drive registered for gdrive sync."""
        return self._controller.sync_roots()

    # ----------------------------
    # Mutations
    # ----------------------------
    def make_directory(
        self,
        name: str,
        parent_path: Optional[str] = None,
        *,
        parent_id: Optional[str] = None,
    ) -> RemoteEntry:
        """
        Create directory name under parent_path (or parent_id).

        An existing directory with that name is returned as-is.

        Raises:
            PathNotFoundError: parent does not exist.
            TypeMismatchError: parent is not a directory.
            AlreadyExistsError: a non-directory named name exists there.
        """
        if not isinstance(name, str) or not name.strip() or "/" in name:
            raise InvalidArgumentError("name must be a non-empty string without '/'")

        if parent_path is not None:
            parent = self._resolver.resolve(parent_path)
            if not parent.found:
                raise PathNotFoundError(
                    f"{parent_path} does not exist",
                    details={"path": parent_path},
                )
            if not parent.entry.is_directory:
                raise TypeMismatchError(
                    f"{parent_path} is not a directory",
                    details={"path": parent_path},
                )
            parent_id = parent.listing_id
            listing = parent.listing
        elif parent_id:
            listing = tuple(self._controller.list_children(parent_id))
        else:
            raise InvalidArgumentError("parent_path or parent_id is required")

        existing = find_by_name(listing, name)
        if existing is not None:
            if not existing.is_directory:
                raise AlreadyExistsError(
                    f"{name} already exists in {parent_path or parent_id} and is not a directory",
                    details={"name": name, "parent_id": parent_id, "id": existing.id},
                )
            logger.warning("Dir %s already exists in %s", name, parent_path or parent_id)
            return existing

        new_id = self._controller.mkdir(name, parent_id)
        return RemoteEntry(id=new_id, name=name, kind=EntryKind.DIRECTORY)

    def sync_up(self, local_dir: str, remote_dir: str, dry_run: bool = False) -> SyncResult:
        """
        Synchronize local_dir with <remote_dir>/<basename of local_dir>.

        The remote directory must exist. The target subdirectory is created
        when missing; when present it must already be a gdrive sync root.
        Runs `sync upload` then `sync download`. Files created on Drive by
        other means are not guaranteed to come back down.

        Note: with dry_run the target subdirectory is still created.
        """
        src = validate_local_directory(local_dir, "local_dir")
        target_name = local_base_name(src)

        dst = self._resolver.resolve(remote_dir)
        if not dst.found:
            raise PathNotFoundError(
                f"{remote_dir} does not exist. Create it first, the {target_name} "
                "directory will be created inside it to sync",
                details={"path": remote_dir},
            )
        if not dst.entry.is_directory:
            raise TypeMismatchError(
                f"{remote_dir} is not a directory",
                details={"path": remote_dir},
            )

        existing = find_by_name(dst.listing, target_name)
        if existing is not None:
            sync_root_ids = {root.id for root in self._controller.sync_roots()}
            if existing.id not in sync_root_ids:
                raise NotASyncRootError(
                    f"{remote_dir} contains {target_name}, which is not a sync dir. "
                    "Remove it first, then try again",
                    details={"path": remote_dir, "name": target_name, "id": existing.id},
                )
            target_id = existing.id
        else:
            target_id = self._controller.mkdir(target_name, dst.entry.id)

        logger.info("Syncing %s with %s (%s)%s", src, target_id, target_name,
                    " [dry run]" if dry_run else "")
        upload_log = self._controller.sync_upload(src, target_id, dry_run=dry_run)
        download_log = self._controller.sync_download(target_id, src, dry_run=dry_run)
        return SyncResult(target_id=target_id, upload_log=upload_log, download_log=download_log)

    def put(self, local_path: str, remote_path: str, overwrite: bool = False) -> str:
        """
        Copy a local file or directory to Drive and return gdrive's log.

        put("myDir", "/docs/")                 -> creates /docs/myDir
        put("myFile", "/docs")                 -> creates /docs/myFile
        put("myFile", "/docs/other")           -> creates /docs/other
        put("myFile", "/docs/myFile", True)    -> updates /docs/myFile

        A directory can only be put once; use sync_up to repeat it.
        """
        src = validate_local_path(local_path, "local_path")
        src_kind = local_kind(src)
        src_name = local_base_name(src)

        dst = self._resolver.resolve(remote_path)
        intent = decide_copy(
            src_kind or EntryKind.UNKNOWN,
            src_kind is not None,
            dst,
            overwrite,
            src_name=src_name,
        )
        _raise_for_intent(intent, local_path=local_path, remote_path=remote_path)

        if intent.action is Action.UPDATE_FILE:
            return self._controller.update(intent.target_id, src)

        return self._controller.upload(
            src,
            parent_id=intent.parent_id,
            name=intent.name if intent.name != src_name else None,
            recursive=intent.recursive,
        )

    def get(self, remote_path: str, local_path: str, overwrite: bool = False) -> str:
        """
        Copy a Drive file or directory into a local directory and return
        gdrive's log.

        The item keeps its Drive name: get("/docs", "/tmp/") creates
        /tmp/docs, get("/docs/a.txt", "/tmp") creates /tmp/a.txt. With
        overwrite an existing /tmp/a.txt is replaced.
        """
        dst = validate_local_path(local_path, "local_path")
        src = self._resolver.resolve(remote_path)

        target_kind = None
        if src.found:
            target_kind = local_kind(os.path.join(dst, src.entry.name))
        intent = decide_download(src, local_kind(dst), target_kind, overwrite)
        _raise_for_intent(intent, local_path=local_path, remote_path=remote_path)

        return self._controller.download(
            intent.target_id,
            dst,
            force=overwrite,
            recursive=intent.recursive,
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _credential_store(self) -> CredentialStore:
        if self._config is None:
            raise InvalidStateError("No ToolConfig: wrapper was built from a controller")
        return CredentialStore(self._config.token_file)


def _raise_for_intent(intent: TransferIntent, **details: Any) -> None:
    intent.raise_for_error(details=details)
    try:
        intent.validate_required_fields()
    except ValueError as exc:
        raise InvalidArgumentError(
            "Invalid transfer decision: missing required fields",
            details={"action": intent.action.value, **details},
            cause=exc,
        ) from exc


