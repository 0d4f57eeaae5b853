# applypatch/errors/patch.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class PatchErrorKind(str, Enum):
    """What went wrong while parsing or applying a patch."""

    ENVELOPE = "envelope"
    HEADER = "header"
    EMPTY_UPDATE = "empty_update"
    CHUNK = "chunk"
    MATCH = "match"
    PATH = "path"


class PatchError(Exception):
    """
    Raised for every patch-level failure.

    The failure category lives in `kind`; the rest is an optional payload that
    presentation layers may use (HTTP-ish `status`, a short remediation `hint`,
    free-form `details`, and the patch `path` involved, when known).
    Filesystem failures are not wrapped: they surface as the builtin OSError.
    """

    def __init__(
        self,
        kind: PatchErrorKind,
        message: str,
        *,
        status: int = 400,
        hint: Optional[str] = None,
        details: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status
        self.hint = hint
        self.details = details
        self.path = path

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"PatchError(kind={self.kind.value!r}, message={self.message!r})"
