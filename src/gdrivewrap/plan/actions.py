"""Transfer actions for gdrivewrap."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """What a put/get should do on the destination side."""

    CREATE_FILE = "CREATE_FILE"
    CREATE_DIRECTORY = "CREATE_DIRECTORY"
    UPDATE_FILE = "UPDATE_FILE"
    ERROR = "ERROR"
