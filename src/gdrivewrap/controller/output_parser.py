"""Convert gdrive's human-readable output into records."""

from __future__ import annotations

import logging
import re
from typing import Union

from gdrivewrap.errors import UnsupportedFormatError
from gdrivewrap.models import EntryKind, RemoteEntry
from gdrivewrap.util.time import parse_listing_time

from .invocation import Subcommand

logger = logging.getLogger(__name__)

_TIMESTAMP = r"\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}"

# Id  Name  Type  Size  Created
_LIST_LINE_RE = re.compile(
    r"^(?P<id>\S+)\s+(?P<name>.+)\s+(?P<type>\w{3})\s+(?P<size>[\d.]*)"
    r"\s+(?P<units>\w*)\s+(?P<created>" + _TIMESTAMP + r")"
)

# Id  Name  Created
_SYNC_LIST_LINE_RE = re.compile(
    r"^(?P<id>\S+)\s+(?P<name>.+)\s+(?P<created>" + _TIMESTAMP + r")"
)

_KEY_VALUE_COMMANDS = {Subcommand.ABOUT, Subcommand.INFO}
_LOG_COMMANDS = {
    Subcommand.UPLOAD,
    Subcommand.UPDATE,
    Subcommand.DOWNLOAD,
    Subcommand.SYNC_UPLOAD,
    Subcommand.SYNC_DOWNLOAD,
}

ParsedOutput = Union[list[RemoteEntry], dict[str, str]]


def parse_output(raw: str, kind: Union[Subcommand, str]) -> ParsedOutput:
    """
    Parse stdout of a gdrive command.

    Returns:
        - list/sync list: list[RemoteEntry]
        - about/info: dict of lower-cased keys to stripped values
        - mkdir: {"id": <new directory id>}
        - upload/update/download/sync upload/sync download: {"log": raw}

    Raises:
        UnsupportedFormatError: for a command without a known output format.
    """
    subcommand = Subcommand.coerce(kind)

    if subcommand is Subcommand.LIST:
        return parse_listing(raw)
    if subcommand is Subcommand.SYNC_LIST:
        return parse_sync_list(raw)
    if subcommand in _KEY_VALUE_COMMANDS:
        return parse_key_values(raw)
    if subcommand is Subcommand.MKDIR:
        return {"id": parse_mkdir(raw)}
    if subcommand in _LOG_COMMANDS:
        return {"log": raw}

    raise UnsupportedFormatError(
        f"Converting gdrive command {subcommand.value!r} output is not supported",
        details={"command": subcommand.value},
    )


def parse_listing(raw: str) -> list[RemoteEntry]:
    """Parse `gdrive list` output (header line + one item per line)."""
    entries: list[RemoteEntry] = []
    for line in _table_rows(raw):
        match = _LIST_LINE_RE.match(line)
        if match is None:
            logger.debug("Skipping unrecognized list line: %r", line)
            continue

        size_text = match.group("size").strip()
        entries.append(
            RemoteEntry(
                id=match.group("id").strip(),
                name=match.group("name").strip(),
                kind=EntryKind.from_code(match.group("type")),
                size=float(size_text) if _is_number(size_text) else None,
                units=match.group("units").strip(),
                created_at=parse_listing_time(match.group("created")),
            )
        )
    return entries


def parse_sync_list(raw: str) -> list[RemoteEntry]:
    """Parse `gdrive sync list` output. Every sync root is a directory."""
    entries: list[RemoteEntry] = []
    for line in _table_rows(raw):
        match = _SYNC_LIST_LINE_RE.match(line)
        if match is None:
            logger.debug("Skipping unrecognized sync list line: %r", line)
            continue

        entries.append(
            RemoteEntry(
                id=match.group("id").strip(),
                name=match.group("name").strip(),
                kind=EntryKind.DIRECTORY,
                created_at=parse_listing_time(match.group("created")),
            )
        )
    return entries


def parse_key_values(raw: str) -> dict[str, str]:
    """
    Parse `Key: value` lines.

    Keys are lower-cased with spaces removed ("Mod Time" -> "modtime").
    Values are split off at the first colon only, so times keep theirs.
    """
    record: dict[str, str] = {}
    for line in _non_blank_lines(raw):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        record[key.lower().replace(" ", "")] = value.strip()
    return record


def parse_mkdir(raw: str) -> str:
    """Return the new directory id from `Directory <id> created`."""
    tokens = raw.split()
    if len(tokens) < 2:
        raise UnsupportedFormatError(
            "Unexpected gdrive mkdir output",
            details={"command": Subcommand.MKDIR.value, "output": raw},
        )
    return tokens[1]


def _non_blank_lines(raw: str) -> list[str]:
    return [line for line in raw.splitlines() if line.strip()]


def _table_rows(raw: str) -> list[str]:
    # First non-blank line is the column header.
    return _non_blank_lines(raw)[1:]


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True
