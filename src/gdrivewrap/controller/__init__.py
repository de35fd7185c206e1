"""Internal controller exports for gdrivewrap."""

from __future__ import annotations

from .drive_controller import GoogleDriveController
from .invocation import Invocation, Subcommand
from .output_parser import (
    parse_key_values,
    parse_listing,
    parse_mkdir,
    parse_output,
    parse_sync_list,
)
from .runner import CommandRunner

__all__ = [
    "GoogleDriveController",
    "CommandRunner",
    "Invocation",
    "Subcommand",
    "parse_output",
    "parse_listing",
    "parse_sync_list",
    "parse_key_values",
    "parse_mkdir",
]
