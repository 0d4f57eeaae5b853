# applypatch/utils/fs.py
from __future__ import annotations

import contextlib
import errno
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .paths import normalize_rel_path, resolve_under


class PatchFileOps(ABC):
    """
    Filesystem collaborator used by apply_patch.

    Paths are patch-relative. Implementations raise OSError subclasses on
    failure and record what they touched in `changes`.
    """

    def __init__(self) -> None:
        self._changes: Dict[str, str] = {}

    @abstractmethod
    def read(self, rel: str) -> str: ...

    @abstractmethod
    def write(self, rel: str, content: str) -> None: ...

    @abstractmethod
    def delete(self, rel: str) -> None: ...

    @abstractmethod
    def exists(self, rel: str) -> bool: ...

    def real_rel(self, rel: str) -> str:
        """Path `rel` actually lands on, relative to the base (no links to follow here)."""
        return normalize_rel_path(rel)

    @property
    def changes(self) -> Dict[str, str]:
        """Relative path -> 'created' | 'updated' | 'deleted'."""
        return self._changes

    def _record(self, rel: str, change: str) -> None:
        rel = normalize_rel_path(rel)
        prev = self._changes.get(rel)
        if prev == "created" and change == "updated":
            return
        if prev == "created" and change == "deleted":
            # Created and removed within one patch: nothing left to report.
            del self._changes[rel]
            return
        if prev == "deleted" and change == "created":
            change = "updated"
        self._changes[rel] = change


class LocalFileOps(PatchFileOps):
    """UTF-8 text files under `base_path`; parent directories are created on write."""

    def __init__(self, base_path: str):
        super().__init__()
        self._base_real = os.path.realpath(base_path)

    @property
    def base_path(self) -> str:
        return self._base_real

    def resolve(self, rel: str) -> str:
        return resolve_under(self._base_real, rel)

    def read(self, rel: str) -> str:
        # newline="" keeps line endings byte-for-byte.
        with open(self.resolve(rel), "r", encoding="utf-8", newline="") as f:
            return f.read()

    def real_rel(self, rel: str) -> str:
        return os.path.relpath(self.resolve(rel), self._base_real).replace(os.sep, "/")

    def write(self, rel: str, content: str) -> None:
        path = self.resolve(rel)
        existed = os.path.exists(path)
        dirpath = os.path.dirname(path)
        os.makedirs(dirpath, exist_ok=True)
        # Stage next to the target and swap in, so a failed write leaves the old file.
        fd, tmp = tempfile.mkstemp(prefix=".ap-", suffix=".tmp", dir=dirpath)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            if existed:
                shutil.copymode(path, tmp)
            else:
                # mkstemp creates 0600; new files get the usual umask-derived mode.
                umask = os.umask(0)
                os.umask(umask)
                os.chmod(tmp, 0o666 & ~umask)
            os.replace(tmp, path)
        finally:
            if os.path.exists(tmp):
                with contextlib.suppress(OSError):
                    os.remove(tmp)
        self._record(rel, "updated" if existed else "created")

    def delete(self, rel: str) -> None:
        os.remove(self.resolve(rel))
        self._record(rel, "deleted")

    def exists(self, rel: str) -> bool:
        return os.path.isfile(self.resolve(rel))


class OverlayFileOps(PatchFileOps):
    """
    In-memory layer over another PatchFileOps, used for dry runs.

    Writes and deletes stay in memory; reads fall through to `base` for paths
    the overlay has not touched, so later operations see earlier ones.
    """

    def __init__(self, base: PatchFileOps):
        super().__init__()
        self._base = base
        self._files: Dict[str, Optional[str]] = {}  # None marks a deletion

    def read(self, rel: str) -> str:
        key = normalize_rel_path(rel)
        if key in self._files:
            content = self._files[key]
            if content is None:
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), rel)
            return content
        return self._base.read(rel)

    def write(self, rel: str, content: str) -> None:
        existed = self.exists(rel)
        self._files[normalize_rel_path(rel)] = content
        self._record(rel, "updated" if existed else "created")

    def delete(self, rel: str) -> None:
        if not self.exists(rel):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), rel)
        self._files[normalize_rel_path(rel)] = None
        self._record(rel, "deleted")

    def exists(self, rel: str) -> bool:
        key = normalize_rel_path(rel)
        if key in self._files:
            return self._files[key] is not None
        return self._base.exists(rel)

    def real_rel(self, rel: str) -> str:
        return self._base.real_rel(rel)

    def contents(self, rel: str) -> Optional[str]:
        """Pending content for `rel`; None if untouched or deleted."""
        return self._files.get(normalize_rel_path(rel))
