"""Configuration for the gdrive executable."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from typing import Optional

from gdrivewrap.errors import InvalidArgumentError

ENV_EXECUTABLE = "GDRIVE_EXECUTABLE"
ENV_CONFIG_DIR = "GDRIVE_CONFIG_DIR"

TOKEN_FILE_NAME = "token_v2.json"

_DEFAULT_EXECUTABLES: dict[tuple[str, str], str] = {
    ("windows", "amd64"): "gdrive-windows-x64.exe",
    ("linux", "x86_64"): "gdrive-linux-x64",
    ("darwin", "x86_64"): "gdrive-osx-x64",
}


@dataclass(slots=True, frozen=True)
class ToolConfig:
    """
    How to invoke gdrive.

    Attributes:
        executable: Path (or PATH-resolvable name) of the gdrive binary.
        config_dir: Directory holding gdrive credentials; passed as `-c`.
            None means gdrive's own default (~/.gdrive).
        timeout_sec: Optional wall-clock limit for one invocation.
    """

    executable: str
    config_dir: Optional[str] = None
    timeout_sec: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.executable, str) or not self.executable.strip():
            raise InvalidArgumentError("ToolConfig.executable must be a non-empty string")

        if self.config_dir is not None and (
            not isinstance(self.config_dir, str) or not self.config_dir.strip()
        ):
            raise InvalidArgumentError("ToolConfig.config_dir must be None or a non-empty string")

        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise InvalidArgumentError("ToolConfig.timeout_sec must be positive")

    @classmethod
    def from_env(cls, *, timeout_sec: Optional[float] = None) -> "ToolConfig":
        """Build from GDRIVE_EXECUTABLE / GDRIVE_CONFIG_DIR."""
        executable = os.environ.get(ENV_EXECUTABLE, "").strip() or default_executable()
        config_dir = os.environ.get(ENV_CONFIG_DIR, "").strip() or None
        if config_dir:
            config_dir = os.path.expanduser(config_dir)
        return cls(executable=executable, config_dir=config_dir, timeout_sec=timeout_sec)

    @property
    def token_file(self) -> str:
        """Path to gdrive's token file."""
        base = self.config_dir or os.path.join(os.path.expanduser("~"), ".gdrive")
        return os.path.join(base, TOKEN_FILE_NAME)


def default_executable(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> str:
    """
    Return the conventional gdrive binary name for a platform.

    Raises:
        InvalidArgumentError: if no prebuilt binary exists for the platform.
    """
    system = (system or platform.system()).lower()
    machine = (machine or platform.machine()).lower()
    if machine in ("x86_64", "amd64", "x64"):
        machine = "amd64" if system == "windows" else "x86_64"

    name = _DEFAULT_EXECUTABLES.get((system, machine))
    if name is None:
        raise InvalidArgumentError(
            "No gdrive executable available for this platform. "
            "Provide your own (from github.com/prasmussen/gdrive).",
            details={"system": system, "machine": machine},
        )
    return name
