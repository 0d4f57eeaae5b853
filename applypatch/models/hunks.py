from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class EditChunk:
    """One localized edit inside an Update File hunk."""

    context_hint: Optional[str] = None  # anchor line; advances the cursor only
    old_lines: Tuple[str, ...] = ()     # empty: pure insertion at end of file
    new_lines: Tuple[str, ...] = ()
    is_end_of_file: bool = False


@dataclass(frozen=True)
class AddFile:
    """Create `path` with `contents` (each added line newline-terminated)."""

    path: str
    contents: str = ""


@dataclass(frozen=True)
class DeleteFile:
    path: str


@dataclass(frozen=True)
class UpdateFile:
    """Edit `path` in place, or write it to `move_path` and drop the original."""

    path: str
    move_path: Optional[str] = None
    chunks: Tuple[EditChunk, ...] = field(default_factory=tuple)


Operation = Union[AddFile, DeleteFile, UpdateFile]
