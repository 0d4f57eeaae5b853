# applypatch/utils/__init__.py
from .fs import LocalFileOps, OverlayFileOps, PatchFileOps
from .paths import normalize_rel_path, resolve_under
from .protect import get_protected_spec, is_protected

__all__ = [
    "PatchFileOps",
    "LocalFileOps",
    "OverlayFileOps",
    "normalize_rel_path",
    "resolve_under",
    "get_protected_spec",
    "is_protected",
]
