"""Public plan exports for gdrivewrap."""

from __future__ import annotations

from .actions import Action
from .decision import decide_copy, decide_download
from .intent import TransferIntent

__all__ = [
    "Action",
    "TransferIntent",
    "decide_copy",
    "decide_download",
]
