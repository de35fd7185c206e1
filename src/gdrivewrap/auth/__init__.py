"""Public auth exports for gdrivewrap."""

from __future__ import annotations

from .credential_store import CredentialStore

__all__ = ["CredentialStore"]
