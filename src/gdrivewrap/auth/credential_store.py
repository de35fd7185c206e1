"""Read-only access to the token file written by gdrive."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

from gdrivewrap.errors import CredentialError
from gdrivewrap.util.time import parse_rfc3339, to_naive_utc

if TYPE_CHECKING:
    from google.oauth2.credentials import Credentials

_REQUIRED_KEYS: tuple[str, ...] = ("access_token",)


class CredentialStore:
    """
    Expose gdrive's token_v2.json.

    The file is owned by gdrive (Go oauth2 token format:
    access_token, token_type, refresh_token, expiry). It is never written
    or refreshed here.
    """

    def __init__(self, token_file: str) -> None:
        self._token_file = token_file

    @property
    def token_file(self) -> str:
        return self._token_file

    def exists(self) -> bool:
        return os.path.isfile(self._token_file)

    def load(self) -> dict[str, Any]:
        """
        Return the token file contents.

        Raises:
            CredentialError: if the file is missing, unreadable or malformed.
        """
        if not self.exists():
            raise CredentialError(
                "gdrive token file not found. Run gdrive once to authenticate.",
                details={"token_file": self._token_file},
            )

        try:
            with open(self._token_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise CredentialError(
                "Failed to read gdrive token file",
                details={"token_file": self._token_file},
                cause=exc,
            ) from exc

        if not isinstance(data, dict):
            raise CredentialError(
                "gdrive token file must contain a JSON object",
                details={"token_file": self._token_file},
            )
        for key in _REQUIRED_KEYS:
            if not isinstance(data.get(key), str):
                raise CredentialError(
                    f"gdrive token file has no {key}",
                    details={"token_file": self._token_file},
                )
        return data

    def credentials(self) -> "Credentials":
        """
        Build google-auth credentials from the token file (no refresh).

        Returns:
            google.oauth2.credentials.Credentials
        """
        try:
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise CredentialError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        data = self.load()

        expiry = None
        if isinstance(data.get("expiry"), str) and data["expiry"]:
            try:
                expiry = to_naive_utc(parse_rfc3339(data["expiry"]))
            except ValueError as exc:
                raise CredentialError(
                    "Invalid expiry in gdrive token file",
                    details={"token_file": self._token_file, "expiry": data["expiry"]},
                    cause=exc,
                ) from exc

        return Credentials(
            token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expiry=expiry,
        )
