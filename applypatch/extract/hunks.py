# applypatch/extract/hunks.py
from typing import List, Optional, Tuple

from ..errors import PatchError, PatchErrorKind
from ..models.hunks import AddFile, DeleteFile, EditChunk, Operation, UpdateFile
from .chunks import parse_update_chunk
from .markers import (
    ADD_FILE_MARKER,
    DELETE_FILE_MARKER,
    HUNK_PREFIX,
    MOVE_TO_MARKER,
    UPDATE_FILE_MARKER,
)


def _parse_add(lines: List[str], start: int, path: str) -> Tuple[AddFile, int]:
    contents: List[str] = []
    i = start + 1
    while i < len(lines) and lines[i].startswith("+"):
        contents.append(lines[i][1:] + "\n")
        i += 1
    return AddFile(path=path, contents="".join(contents)), i - start


def _parse_update(lines: List[str], start: int, path: str) -> Tuple[UpdateFile, int]:
    i = start + 1
    move_path: Optional[str] = None
    if i < len(lines) and lines[i].startswith(MOVE_TO_MARKER):
        move_path = lines[i][len(MOVE_TO_MARKER):]
        i += 1

    chunks: List[EditChunk] = []
    while i < len(lines) and not lines[i].startswith(HUNK_PREFIX):
        if lines[i].strip() == "":
            i += 1
            continue
        chunk, consumed = parse_update_chunk(lines, i)
        chunks.append(chunk)
        i += consumed

    if not chunks:
        raise PatchError(
            PatchErrorKind.EMPTY_UPDATE,
            f"Update file hunk for path '{path}' is empty",
            hint="Add at least one '@@' section with '-'/'+' lines, or drop the hunk",
            path=path,
        )
    return UpdateFile(path=path, move_path=move_path, chunks=tuple(chunks)), i - start


def parse_one_hunk(lines: List[str], start: int) -> Tuple[Operation, int]:
    """
    Parse the file operation whose header sits at `lines[start]`.

    Headers are tried in order Add, Delete, Update. Returns
    (operation, number_of_lines_consumed).
    """
    header = lines[start].strip()

    if header.startswith(ADD_FILE_MARKER):
        return _parse_add(lines, start, header[len(ADD_FILE_MARKER):])

    if header.startswith(DELETE_FILE_MARKER):
        return DeleteFile(path=header[len(DELETE_FILE_MARKER):]), 1

    if header.startswith(UPDATE_FILE_MARKER):
        return _parse_update(lines, start, header[len(UPDATE_FILE_MARKER):])

    raise PatchError(
        PatchErrorKind.HEADER,
        f"Invalid hunk header: '{header}'",
        hint="Expected '*** Add File: ', '*** Delete File: ' or '*** Update File: '",
    )
