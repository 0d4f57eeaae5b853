# applypatch/utils/protect.py
from typing import Iterable, Optional

import pathspec

DEFAULT_PROTECTED = [".git/"]


def get_protected_spec(patterns: Optional[Iterable[str]] = None) -> pathspec.GitIgnoreSpec:
    """
    Compile .gitignore-style patterns naming paths a patch may not touch.
    '.git/' is always included.
    """
    lines = list(DEFAULT_PROTECTED)
    if patterns:
        lines.extend(p for p in patterns if p and p.strip())
    return pathspec.GitIgnoreSpec.from_lines(lines)


def is_protected(spec: pathspec.PathSpec, rel_path: str) -> bool:
    """True if the normalized relative path is matched by the protected spec."""
    return spec.match_file(rel_path)
