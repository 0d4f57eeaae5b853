# applypatch/utils/paths.py
import os
import posixpath
import re

from ..errors import PatchError, PatchErrorKind


def _path_violation(rel_path: str, reason: str) -> PatchError:
    return PatchError(
        PatchErrorKind.PATH,
        f"{reason}: '{rel_path}'",
        hint="Use a path relative to the working directory",
        path=rel_path,
    )


def normalize_rel_path(rel_path: str) -> str:
    """
    Normalize a patch path to a POSIX-style relative path.
    Raises PatchError (kind PATH) for empty, absolute or escaping paths.
    """
    if not rel_path or not rel_path.strip():
        raise _path_violation(rel_path, "Empty path")
    p = rel_path.replace("\\", "/")
    if p.startswith("/") or p.startswith("~") or re.match(r"^[A-Za-z]:/", p):
        raise _path_violation(rel_path, "Absolute paths are not allowed")
    norm = posixpath.normpath(p)
    if norm == ".." or norm.startswith("../"):
        raise _path_violation(rel_path, "Path escapes the working directory")
    return norm


def resolve_under(base_real: str, rel_path: str) -> str:
    """
    Join a patch path onto base_real and enforce containment.

    The target does not need to exist yet (new files, move destinations).
    Symlinks in the existing part of the path are followed before the check,
    so a link inside base_real cannot point the write elsewhere.
    """
    norm = normalize_rel_path(rel_path)
    resolved = os.path.realpath(os.path.join(base_real, *norm.split("/")))
    # commonpath rather than a prefix test: '/base-other' must not pass for '/base'.
    if os.path.commonpath([base_real, resolved]) != base_real:
        raise _path_violation(rel_path, "Path escapes the working directory")
    return resolved
