from .commit import apply_operations, apply_patch, apply_update_chunks, seek_sequence
from .errors import PatchError, PatchErrorKind
from .extract import extract_patch_from_text, parse_patch
from .models import AddFile, DeleteFile, EditChunk, Operation, UpdateFile
from .utils.fs import LocalFileOps, OverlayFileOps, PatchFileOps

__all__ = [
    "parse_patch",
    "apply_patch",
    "apply_operations",
    "apply_update_chunks",
    "seek_sequence",
    "extract_patch_from_text",
    "AddFile",
    "DeleteFile",
    "UpdateFile",
    "EditChunk",
    "Operation",
    "PatchFileOps",
    "LocalFileOps",
    "OverlayFileOps",
    "PatchError",
    "PatchErrorKind",
]
