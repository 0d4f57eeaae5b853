# applypatch/commit/seek.py
from typing import Optional, Sequence


def _block_equal(target: Sequence[str], at: int, block: Sequence[str], loose: bool) -> bool:
    for j, expected in enumerate(block):
        actual = target[at + j]
        if loose:
            if actual.strip() != expected.strip():
                return False
        elif actual != expected:
            return False
    return True


def seek_sequence(lines: Sequence[str], pattern: Sequence[str], start: int) -> Optional[int]:
    """
    Return the first index >= `start` where `pattern` occurs in `lines`.

    Each candidate position is tried byte-exact first and then with every line
    stripped of surrounding whitespace, before moving on to the next position.
    An empty pattern matches at `start`. Returns None when nothing matches.
    """
    if not pattern:
        return start
    if len(pattern) > len(lines):
        return None

    for i in range(start, len(lines) - len(pattern) + 1):
        if _block_equal(lines, i, pattern, loose=False):
            return i
        if _block_equal(lines, i, pattern, loose=True):
            return i
    return None
