"""Runs gdrive as a child process."""

from __future__ import annotations

import logging
import shlex
import subprocess

from gdrivewrap.config import ToolConfig
from gdrivewrap.errors import ExternalToolError

from .invocation import Invocation

logger = logging.getLogger(__name__)


class CommandRunner:
    """Execute one Invocation synchronously and return its stdout."""

    def __init__(self, config: ToolConfig) -> None:
        self._config = config

    @property
    def config(self) -> ToolConfig:
        return self._config

    def run(self, invocation: Invocation) -> str:
        """
        Run gdrive and wait for it to exit.

        Raises:
            ExternalToolError: if the process cannot be started, times out,
                or exits with a nonzero status.
        """
        argv = invocation.argv(self._config)
        command = shlex.join(argv)
        logger.debug("gdrive: %s", command)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._config.timeout_sec,
            )
        except subprocess.TimeoutExpired as exc:
            logger.error("gdrive timed out after %ss: %s", self._config.timeout_sec, command)
            raise ExternalToolError(
                "The gdrive command timed out",
                details={"command": command, "timeout_sec": self._config.timeout_sec},
                cause=exc,
            ) from exc
        except OSError as exc:
            logger.error("gdrive could not be started: %s (%s)", command, exc)
            raise ExternalToolError(
                "Failed to start the gdrive executable",
                details={"command": command, "executable": self._config.executable},
                cause=exc,
            ) from exc

        if completed.returncode != 0:
            logger.error(
                "gdrive failed (rc=%d): %s\n%s%s",
                completed.returncode,
                command,
                completed.stdout,
                completed.stderr,
            )
            raise ExternalToolError(
                "The gdrive command failed",
                details={
                    "command": command,
                    "returncode": completed.returncode,
                    "stdout": completed.stdout,
                    "stderr": completed.stderr,
                },
            )

        return completed.stdout
