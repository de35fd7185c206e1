"""Virtual path resolution for gdrivewrap."""

from __future__ import annotations

from .path_resolver import PathResolver, find_by_name, split_virtual_path

__all__ = ["PathResolver", "find_by_name", "split_virtual_path"]
