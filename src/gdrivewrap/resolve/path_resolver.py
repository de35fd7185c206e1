"""Resolve slash-separated virtual paths to Drive ids by walking listings."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from gdrivewrap.errors import PathNotFoundError, TypeMismatchError
from gdrivewrap.models import RemoteEntry, ResolutionResult
from gdrivewrap.util.ids import PATH_SEPARATOR, ROOT_ID, is_root_segment


def split_virtual_path(path: str) -> tuple[list[str], bool]:
    """
    Split a virtual path into segments.

    Exactly one trailing separator is stripped and reported, so "/docs/"
    gives (["", "docs"], True). The empty string and "/" give ([""], ...).
    """
    if not isinstance(path, str):
        raise TypeError("path must be a str")

    trailing = path.endswith(PATH_SEPARATOR)
    if trailing:
        path = path[: -len(PATH_SEPARATOR)]
    return path.split(PATH_SEPARATOR), trailing


def find_by_name(entries: Iterable[RemoteEntry], name: str) -> Optional[RemoteEntry]:
    """Return the first entry whose name equals name exactly."""
    for entry in entries:
        if entry.name == name:
            return entry
    return None


class PathResolver:
    """
    Walk a virtual path one segment at a time.

    Each non-root segment costs one `gdrive list` of its parent; when the
    walk ends on a directory, that directory is listed once more so callers
    get its contents. Nothing is cached between calls.
    """

    def __init__(self, controller: Any) -> None:
        self._controller = controller

    def resolve(self, path: str) -> ResolutionResult:
        """
        Resolve path to a ResolutionResult.

        Raises:
            PathNotFoundError: if an intermediate segment does not exist.
            TypeMismatchError: if an intermediate segment is not a directory.
        """
        segments, trailing = split_virtual_path(path)

        current = RemoteEntry.root()
        parent_id = ROOT_ID
        traversed: list[str] = []

        for index, segment in enumerate(segments):
            is_last = index == len(segments) - 1

            if is_root_segment(segment):
                current = RemoteEntry.root()
                parent_id = ROOT_ID
                traversed = [segment]
                continue

            listing = tuple(self._controller.list_children(current.id))
            match = find_by_name(listing, segment)

            if match is None:
                if is_last:
                    # Caller may create it under current.
                    return ResolutionResult(
                        entry=RemoteEntry.not_found(segment),
                        parent_id=current.id,
                        listing=listing,
                        trailing_separator=trailing,
                    )
                raise PathNotFoundError(
                    f"sub dir {segment} does not exist in "
                    f"{_join(traversed) or PATH_SEPARATOR}",
                    details={"path": path, "segment": segment, "prefix": _join(traversed)},
                )

            if not match.is_directory:
                if is_last:
                    return ResolutionResult(
                        entry=match,
                        parent_id=current.id,
                        listing=listing,
                        trailing_separator=trailing,
                    )
                raise TypeMismatchError(
                    f"{segment} in {_join(traversed) or PATH_SEPARATOR} is not a directory",
                    details={"path": path, "segment": segment, "prefix": _join(traversed)},
                )

            parent_id = current.id
            current = match
            traversed.append(segment)

        return ResolutionResult(
            entry=current,
            parent_id=parent_id,
            listing=tuple(self._controller.list_children(current.id)),
            trailing_separator=trailing,
        )


def _join(segments: list[str]) -> str:
    return PATH_SEPARATOR.join(segments)
