"""Decide what a put/get should do, from resolved source and destination."""

from __future__ import annotations

from typing import Optional

from gdrivewrap.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    PathNotFoundError,
    TypeMismatchError,
)
from gdrivewrap.models import EntryKind, ResolutionResult
from gdrivewrap.resolve import find_by_name

from .actions import Action
from .intent import TransferIntent


def decide_copy(
    src_kind: EntryKind,
    src_exists: bool,
    dst: ResolutionResult,
    overwrite: bool,
    *,
    src_name: str = "",
) -> TransferIntent:
    """
    Decide a local -> Drive copy (put).

    Rules:
        - dst missing: create it under dst.parent_id, named after the last
          path segment (recursive for directories).
        - dst is a file: update it (file source, overwrite) or fail.
        - dst is a directory, file source: update/create src_name inside it.
        - dst is a directory, directory source: only "into" (trailing "/")
          and only if nothing named src_name is there; otherwise use sync.
    """
    if not src_exists:
        return TransferIntent.error(
            InvalidArgumentError,
            f"{src_name or 'source'} does not exist. Nothing to copy?",
        )

    src_is_dir = src_kind is EntryKind.DIRECTORY
    entry = dst.entry

    if not dst.found:
        return TransferIntent(
            action=Action.CREATE_DIRECTORY if src_is_dir else Action.CREATE_FILE,
            parent_id=dst.parent_id,
            name=entry.name,
            recursive=src_is_dir,
        )

    if not entry.is_directory:
        if src_is_dir:
            return TransferIntent.error(
                TypeMismatchError,
                f"cannot copy a directory onto a file: {src_name} -> {entry.name}",
            )
        if overwrite:
            return TransferIntent(action=Action.UPDATE_FILE, target_id=entry.id, name=entry.name)
        return TransferIntent.error(
            AlreadyExistsError,
            f"destination file exists: {entry.name}. Set overwrite to True?",
        )

    if not src_name:
        return TransferIntent.error(
            InvalidArgumentError,
            f"a source name is required to copy into {entry.name or '/'}",
        )
    existing = find_by_name(dst.listing, src_name)

    if not src_is_dir:
        if existing is None:
            return TransferIntent(action=Action.CREATE_FILE, parent_id=entry.id, name=src_name)
        if existing.is_directory:
            return TransferIntent.error(
                TypeMismatchError,
                f"{src_name} is a file but {entry.name or '/'}/{src_name} is a directory",
            )
        if overwrite:
            return TransferIntent(action=Action.UPDATE_FILE, target_id=existing.id, name=src_name)
        return TransferIntent.error(
            AlreadyExistsError,
            f"{entry.name or ''}/{src_name} exists. Set overwrite to True?",
        )

    if not dst.trailing_separator:
        return TransferIntent.error(
            TypeMismatchError,
            f"{src_name} is a dir and {entry.name or '/'} is a dir. "
            "use sync instead of copy (or end the destination with '/' to copy into it)",
        )
    if existing is not None:
        return TransferIntent.error(
            AlreadyExistsError,
            f"{entry.name or ''}/{src_name} exists. use sync instead of copy",
        )
    return TransferIntent(
        action=Action.CREATE_DIRECTORY,
        parent_id=entry.id,
        name=src_name,
        recursive=True,
    )


def decide_download(
    src: ResolutionResult,
    dst_kind: Optional[EntryKind],
    target_kind: Optional[EntryKind],
    overwrite: bool,
) -> TransferIntent:
    """
    Decide a Drive -> local copy (get).

    gdrive always downloads *into* a local directory and keeps the Drive
    name, so dst is that directory and target is dst/<src name>. None means
    "does not exist locally".
    """
    entry = src.entry
    if not src.found:
        return TransferIntent.error(
            PathNotFoundError,
            f"{entry.name} does not exist. Nothing to get",
        )

    if dst_kind is not None and dst_kind is not EntryKind.DIRECTORY:
        return TransferIntent.error(
            TypeMismatchError,
            "destination already exists and is a file. "
            "Remove it first to create a target directory",
        )

    src_is_dir = entry.is_directory

    if target_kind is not None:
        if src_is_dir and target_kind is not EntryKind.DIRECTORY:
            return TransferIntent.error(
                TypeMismatchError,
                f"cannot copy dir {entry.name} onto a file",
            )
        if not src_is_dir and target_kind is EntryKind.DIRECTORY:
            return TransferIntent.error(
                TypeMismatchError,
                f"cannot copy file {entry.name} onto a directory",
            )
        if not overwrite:
            return TransferIntent.error(
                AlreadyExistsError,
                f"{entry.name} already exists. Use overwrite=True to overwrite",
            )

    if src_is_dir:
        return TransferIntent(
            action=Action.CREATE_DIRECTORY,
            target_id=entry.id,
            name=entry.name,
            recursive=True,
        )
    return TransferIntent(
        action=Action.UPDATE_FILE if target_kind is not None else Action.CREATE_FILE,
        target_id=entry.id,
        name=entry.name,
    )
