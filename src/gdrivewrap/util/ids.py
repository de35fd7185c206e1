from __future__ import annotations

# Drive id of the user's "My Drive" folder, as accepted by gdrive.
ROOT_ID: str = "root"

# Top-level path segment that gdrive and the Drive UI use for the root.
HOME_ALIAS: str = "My Drive"

PATH_SEPARATOR: str = "/"


def is_root_segment(segment: str) -> bool:
    """Empty segments and the home alias both denote the Drive root."""
    return not segment or segment == HOME_ALIAS


def is_not_found_id(file_id: str | None) -> bool:
    """An empty id marks an entry that does not exist on Drive yet."""
    return not file_id
