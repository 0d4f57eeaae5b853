from .chunks import parse_update_chunk
from .envelope import parse_patch
from .hunks import parse_one_hunk
from .text import extract_patch_from_text

__all__ = [
    "parse_patch",
    "parse_one_hunk",
    "parse_update_chunk",
    "extract_patch_from_text",
]
