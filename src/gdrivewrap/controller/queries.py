"""Drive search query builders for `gdrive list --query`."""

from __future__ import annotations


def escape_query_value(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_parent_query(parent_id: str) -> str:
    return f"trashed=false and '{escape_query_value(parent_id)}' in parents"


def build_search_query(substring: str, *, include_trashed: bool = False) -> str:
    trashed = "true" if include_trashed else "false"
    return f"trashed={trashed} and name contains '{escape_query_value(substring)}'"
