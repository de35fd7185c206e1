"""TransferIntent model (explicit fields; one tag per outcome)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from gdrivewrap.errors import GDriveWrapError

from .actions import Action


@dataclass(frozen=True, slots=True)
class TransferIntent:
    """
    The outcome of a copy decision.

    Fields used per action:
        - CREATE_FILE / CREATE_DIRECTORY (put): parent_id, name
        - UPDATE_FILE (put): target_id
        - CREATE_* / UPDATE_FILE (get): target_id is the Drive item to fetch
        - ERROR: error_type, reason
    recursive is set whenever a directory tree is transferred.
    """

    action: Action

    parent_id: Optional[str] = None
    target_id: Optional[str] = None
    name: Optional[str] = None
    recursive: bool = False

    reason: Optional[str] = None
    error_type: Optional[type[GDriveWrapError]] = None

    @classmethod
    def error(cls, error_type: type[GDriveWrapError], reason: str) -> "TransferIntent":
        return cls(action=Action.ERROR, reason=reason, error_type=error_type)

    @property
    def is_error(self) -> bool:
        return self.action is Action.ERROR

    def raise_for_error(self, details: Optional[dict[str, Any]] = None) -> None:
        """Raise the decided error, if any."""
        if not self.is_error:
            return
        error_type = self.error_type or GDriveWrapError
        raise error_type(self.reason or "transfer rejected", details=details)

    def validate_required_fields(self) -> None:
        """Validate required fields according to action. Raises ValueError."""
        if self.action is Action.ERROR:
            _require(self.reason, "reason")
            return

        if self.action is Action.UPDATE_FILE:
            # An empty id is the not-found sentinel, never an update target.
            _require(self.target_id, "target_id")
            return

        if self.action in (Action.CREATE_FILE, Action.CREATE_DIRECTORY):
            if self.target_id is None:
                _require(self.parent_id, "parent_id")
                _require(self.name, "name")
            else:
                _require(self.target_id, "target_id")
            return

        raise ValueError(f"Unsupported action: {self.action}")


def _require(value: object, field_name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Missing required field: {field_name}")
