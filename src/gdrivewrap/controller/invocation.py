"""Structured description of one gdrive invocation."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import Union

from gdrivewrap.config import ToolConfig
from gdrivewrap.errors import InvalidArgumentError, UnsupportedFormatError

MAX_POSITIONAL_ARGS = 2


class Subcommand(str, Enum):
    """gdrive subcommands used by gdrivewrap."""

    ABOUT = "about"
    INFO = "info"
    LIST = "list"
    MKDIR = "mkdir"
    UPLOAD = "upload"
    UPDATE = "update"
    DOWNLOAD = "download"
    SYNC_LIST = "sync list"
    SYNC_UPLOAD = "sync upload"
    SYNC_DOWNLOAD = "sync download"

    @property
    def words(self) -> list[str]:
        return self.value.split()

    @classmethod
    def coerce(cls, value: Union["Subcommand", str]) -> "Subcommand":
        """Accept a Subcommand or its (case-insensitive) command text."""
        if isinstance(value, cls):
            return value
        text = " ".join(str(value).lower().split())
        try:
            return cls(text)
        except ValueError as exc:
            raise UnsupportedFormatError(
                f"Converting gdrive command {value!r} output is not supported",
                details={"command": str(value)},
                cause=exc,
            ) from exc


@dataclass(frozen=True, slots=True)
class Invocation:
    """
    A gdrive call: subcommand, flag tokens and up to two positional arguments.

    Nothing is quoted here; the argv list is handed to the process as-is and
    shell quoting only happens in command_line() for diagnostics.
    """

    subcommand: Subcommand
    flags: tuple[str, ...] = ()
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "subcommand", Subcommand.coerce(self.subcommand))
        object.__setattr__(self, "flags", tuple(f for f in self.flags if f))
        args = tuple(a for a in self.args if a)
        if len(args) > MAX_POSITIONAL_ARGS:
            raise InvalidArgumentError(
                "gdrive invocations take at most two positional arguments",
                details={"subcommand": self.subcommand.value, "args": list(args)},
            )
        object.__setattr__(self, "args", args)

    def argv(self, config: ToolConfig) -> list[str]:
        argv = [config.executable]
        if config.config_dir:
            argv.extend(["-c", config.config_dir])
        argv.extend(self.subcommand.words)
        argv.extend(self.flags)
        argv.extend(self.args)
        return argv

    def command_line(self, config: ToolConfig) -> str:
        return shlex.join(self.argv(config))
