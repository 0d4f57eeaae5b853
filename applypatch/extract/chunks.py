# applypatch/extract/chunks.py
from typing import List, Optional, Tuple

from ..errors import PatchError, PatchErrorKind
from ..models.hunks import EditChunk
from .markers import (
    CHANGE_CONTEXT_MARKER,
    EMPTY_CHANGE_CONTEXT_MARKER,
    EOF_MARKER,
    HUNK_PREFIX,
)


def _unexpected_line(line: str) -> PatchError:
    return PatchError(
        PatchErrorKind.CHUNK,
        f"Unexpected line in update hunk: '{line}'",
        hint="Every line of an edit must start with ' ', '-' or '+'",
    )


def parse_update_chunk(lines: List[str], start: int) -> Tuple[EditChunk, int]:
    """
    Parse one edit region of an Update File hunk beginning at `lines[start]`.

    An optional `@@` / `@@ <hint>` marker opens the chunk; without one the body
    starts immediately (the implicit first chunk). The body runs until
    `*** End of File` (consumed), the next `***` / `@@` line (not consumed), or
    an unprefixed line once some content has been read.

    Returns (chunk, number_of_lines_consumed).
    """
    i = start
    context_hint: Optional[str] = None

    if lines[i] == EMPTY_CHANGE_CONTEXT_MARKER:
        i += 1
    elif lines[i].startswith(CHANGE_CONTEXT_MARKER):
        context_hint = lines[i][len(CHANGE_CONTEXT_MARKER):]
        i += 1

    old_lines: List[str] = []
    new_lines: List[str] = []
    is_end_of_file = False
    has_content = False

    while i < len(lines):
        line = lines[i]

        if line == EOF_MARKER:
            is_end_of_file = True
            i += 1
            break

        if line.startswith(HUNK_PREFIX) or line.startswith(EMPTY_CHANGE_CONTEXT_MARKER):
            break

        tag, body = line[:1], line[1:]
        if tag == " ":
            old_lines.append(body)
            new_lines.append(body)
        elif tag == "-":
            old_lines.append(body)
        elif tag == "+":
            new_lines.append(body)
        elif line.strip() == "":
            # Blank context line written without its leading space.
            old_lines.append("")
            new_lines.append("")
        elif not has_content:
            raise _unexpected_line(line)
        else:
            break

        has_content = True
        i += 1

    if i == start:
        # Nothing was consumed (e.g. "@@foo"); the caller would spin forever.
        raise _unexpected_line(lines[start])

    chunk = EditChunk(
        context_hint=context_hint,
        old_lines=tuple(old_lines),
        new_lines=tuple(new_lines),
        is_end_of_file=is_end_of_file,
    )
    return chunk, i - start
