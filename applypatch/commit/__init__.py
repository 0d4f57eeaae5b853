from .core import apply_operations, apply_patch
from .patch import apply_update_chunks, compute_replacements
from .seek import seek_sequence

__all__ = [
    "apply_patch",
    "apply_operations",
    "apply_update_chunks",
    "compute_replacements",
    "seek_sequence",
]
