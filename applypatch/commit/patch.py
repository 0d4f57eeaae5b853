# applypatch/commit/patch.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .._logging import resolve_logger
from ..errors import PatchError, PatchErrorKind
from ..models.hunks import EditChunk
from .seek import seek_sequence

__all__ = ["apply_update_chunks", "compute_replacements"]

# (start, length, new_lines) against the original line buffer
Replacement = Tuple[int, int, List[str]]


def compute_replacements(
    lines: Sequence[str],
    chunks: Sequence[EditChunk],
    *,
    path: Optional[str] = None,
    log=None,
) -> List[Replacement]:
    """
    Locate every chunk in `lines` and return the replacements to perform.

    Chunks are resolved top to bottom with a cursor that never moves back, so
    each chunk is only searched for below the previous one.

    Raises:
        PatchError: (kind MATCH) when a chunk's old lines cannot be found.
    """
    if log is None:
        log = resolve_logger()

    replacements: List[Replacement] = []
    cursor = 0

    for n, chunk in enumerate(chunks, 1):
        if chunk.context_hint:
            hint_idx = seek_sequence(lines, [chunk.context_hint], cursor)
            if hint_idx is not None:
                cursor = hint_idx + 1
                log.debug(f"[{n}] context {chunk.context_hint!r} at line {hint_idx + 1}")
            else:
                log.debug(f"[{n}] context {chunk.context_hint!r} not found; cursor stays at {cursor}")

        if not chunk.old_lines:
            # Pure additions always go to the end of the file.
            log.debug(f"[{n}] append {len(chunk.new_lines)} lines at end of file")
            replacements.append((len(lines), 0, list(chunk.new_lines)))
            continue

        pattern = list(chunk.old_lines)
        new_lines = list(chunk.new_lines)
        if pattern[-1] == "" and not chunk.is_end_of_file:
            pattern = pattern[:-1]
            if new_lines and new_lines[-1] == "":
                new_lines = new_lines[:-1]

        match_idx = seek_sequence(lines, pattern, cursor)
        if match_idx is None:
            expected = "\n".join(pattern)
            raise PatchError(
                PatchErrorKind.MATCH,
                f"Failed to find expected lines:\n{expected}",
                hint="Re-read the file; the '-' and ' ' lines must match its current content",
                details=f"searched from line {cursor + 1}",
                path=path,
            )

        log.debug(f"[{n}] replace {len(pattern)} lines at line {match_idx + 1}")
        replacements.append((match_idx, len(pattern), new_lines))
        cursor = match_idx + len(pattern)

    return replacements


def apply_update_chunks(
    content: str,
    chunks: Sequence[EditChunk],
    *,
    path: Optional[str] = None,
    logger=None,
    log: bool = False,
) -> str:
    """
    Apply the edit chunks of one Update File hunk to `content`.

    Replacements are computed against the original lines and spliced
    bottom-to-top so earlier offsets stay valid. The result always ends with
    exactly one newline (an empty result stays empty).

    Raises:
        PatchError: if any chunk fails to match.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()

    replacements = compute_replacements(lines, chunks, path=path, log=log)

    for start, length, new_lines in sorted(replacements, key=lambda r: r[0], reverse=True):
        lines[start:start + length] = new_lines

    if lines and lines[-1] != "":
        lines.append("")
    return "\n".join(lines)
