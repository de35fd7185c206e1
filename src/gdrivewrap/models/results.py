"""Result models for transfer and sync operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class SyncResult:
    """Logs of a sync_up run: the upload pass followed by the download pass."""

    target_id: str
    upload_log: str
    download_log: str

    @property
    def log(self) -> str:
        return self.upload_log + self.download_log

    def __iter__(self) -> Iterator[str]:
        return iter((self.upload_log, self.download_log))
