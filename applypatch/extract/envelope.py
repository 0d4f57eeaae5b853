# applypatch/extract/envelope.py
from __future__ import annotations

import logging
from typing import List

from .._logging import resolve_logger
from ..errors import PatchError, PatchErrorKind
from ..models.hunks import Operation
from .hunks import parse_one_hunk
from .markers import BEGIN_PATCH_MARKER, END_PATCH_MARKER

__all__ = ["parse_patch"]


def parse_patch(
    text: str,
    *,
    logger=None,
    log: bool = False,
) -> List[Operation]:
    """
    Parse a `*** Begin Patch` ... `*** End Patch` envelope into operations.

    The result preserves the order of the hunks in the text, which is the order
    they must be applied in. An envelope with no hunks yields an empty list.

    Raises:
        PatchError: on a malformed envelope, hunk header or chunk body.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise PatchError(
            PatchErrorKind.ENVELOPE,
            "Patch must have at least begin and end markers",
        )
    if lines[0] != BEGIN_PATCH_MARKER:
        raise PatchError(
            PatchErrorKind.ENVELOPE,
            f"The first line of the patch must be '{BEGIN_PATCH_MARKER}'",
        )
    if lines[-1] != END_PATCH_MARKER:
        raise PatchError(
            PatchErrorKind.ENVELOPE,
            f"The last line of the patch must be '{END_PATCH_MARKER}'",
        )

    operations: List[Operation] = []
    i = 1
    while i < len(lines) - 1:
        op, consumed = parse_one_hunk(lines, i)
        log.debug(f"line {i + 1}: {type(op).__name__} {op.path!r} ({consumed} lines)")
        operations.append(op)
        i += consumed

    log.debug(f"Parsed {len(operations)} operations")
    return operations
