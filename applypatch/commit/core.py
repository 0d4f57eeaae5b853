# applypatch/commit/core.py
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from .._logging import resolve_logger
from ..errors import PatchError, PatchErrorKind
from ..extract.envelope import parse_patch
from ..models.hunks import AddFile, DeleteFile, Operation, UpdateFile
from ..utils.fs import LocalFileOps, OverlayFileOps, PatchFileOps
from ..utils.paths import normalize_rel_path
from ..utils.protect import get_protected_spec, is_protected
from .patch import apply_update_chunks

__all__ = ["apply_patch", "apply_operations"]


def _check_path(spec, rel_path: str, file_ops: PatchFileOps, lg) -> None:
    # The real path matters too: a link such as g -> .git must not slip through.
    candidates = {normalize_rel_path(rel_path), file_ops.real_rel(rel_path)}
    if any(is_protected(spec, p) for p in candidates):
        lg.warning("Refusing to touch protected path %r", rel_path)
        raise PatchError(
            PatchErrorKind.PATH,
            f"Path is protected: '{rel_path}'",
            hint="Leave this path out of the patch",
            status=403,
            path=rel_path,
        )


def _apply_one(op: Operation, ops: PatchFileOps, lg) -> str:
    if isinstance(op, AddFile):
        ops.write(op.path, op.contents)
        lg.debug(f"A {op.path} ({len(op.contents)} chars)")
        return f"A {op.path}"

    if isinstance(op, DeleteFile):
        ops.delete(op.path)
        lg.debug(f"D {op.path}")
        return f"D {op.path}"

    if isinstance(op, UpdateFile):
        original = ops.read(op.path)
        updated = apply_update_chunks(original, op.chunks, path=op.path, logger=lg)
        if op.move_path:
            ops.write(op.move_path, updated)
            # Moving onto itself must not delete what was just written.
            if normalize_rel_path(op.move_path) != normalize_rel_path(op.path):
                ops.delete(op.path)
            lg.debug(f"M {op.path} -> {op.move_path}")
            return f"M {op.move_path}"
        ops.write(op.path, updated)
        lg.debug(f"M {op.path}")
        return f"M {op.path}"

    raise TypeError(f"Unknown operation: {op!r}")


def apply_operations(
    operations: Iterable[Operation],
    file_ops: PatchFileOps,
    *,
    protected: Optional[Iterable[str]] = None,
    logger=None,
    log: bool = False,
) -> List[str]:
    """
    Apply already-parsed operations through `file_ops`, one at a time.

    Stops at the first failure; operations before it stay applied.
    Returns one status line per operation: 'A <path>', 'D <path>', 'M <path>'.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    spec = get_protected_spec(protected)

    affected: List[str] = []
    for op in operations:
        _check_path(spec, op.path, file_ops, lg)
        if isinstance(op, UpdateFile) and op.move_path:
            _check_path(spec, op.move_path, file_ops, lg)
        affected.append(_apply_one(op, file_ops, lg))
    return affected


def apply_patch(
    text: str,
    cwd: Optional[str] = None,
    *,
    dry_run: bool = False,
    protected: Optional[Iterable[str]] = None,
    file_ops: Optional[PatchFileOps] = None,
    logger=None,
    log: bool = False,
) -> List[str]:
    """
    Parse `text` and apply it to the files under `cwd`.

    Args:
        text: The patch, from '*** Begin Patch' to '*** End Patch'.
        cwd: Directory patch paths are relative to (default: os.getcwd()).
        dry_run: If True, run every operation against an in-memory overlay
                 (matching still happens, nothing is written).
        protected: Extra .gitignore-style patterns the patch may not touch;
                   '.git/' is always protected.
        file_ops: Custom filesystem collaborator; defaults to LocalFileOps(cwd).
        logger / log: Opt-in logging, see applypatch._logging.

    Returns:
        Status lines in operation order, e.g. ['A new.txt', 'M src/app.py'].

    Raises:
        PatchError: malformed patch, unmatched chunk or disallowed path.
        OSError: any filesystem failure, unchanged.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    operations = parse_patch(text, logger=lg)
    ops = file_ops or LocalFileOps(cwd if cwd is not None else os.getcwd())
    if dry_run:
        ops = OverlayFileOps(ops)
        lg.debug("Dry run: changes are kept in memory")

    return apply_operations(operations, ops, protected=protected, logger=lg)
