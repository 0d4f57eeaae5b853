"""
Opt-in log plumbing shared by the parse and apply entry points.

Every public call takes `logger=None, log=False`. With neither set the call
gets a NoopLogger and emits nothing; `log=True` routes records to the
standard `logging` tree under the "applypatch" namespace, and an explicit
`logger` (a Logger or LoggerAdapter) is used as is.
"""
from __future__ import annotations

import logging
from typing import Union

ROOT_NAME = "applypatch"

# No output unless the host configures handlers (and no lastResort stderr).
logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())

_LOG_METHODS = frozenset(
    {"debug", "info", "warning", "warn", "error", "exception", "critical", "log"}
)


class NoopLogger:
    """Stands in for a Logger when the caller did not opt in."""

    def isEnabledFor(self, level: int) -> bool:
        return False

    def __getattr__(self, attr: str):
        if attr in _LOG_METHODS:
            return _discard
        raise AttributeError(attr)


def _discard(*args, **kwargs) -> None:
    return None


PatchLogger = Union[logging.Logger, logging.LoggerAdapter, NoopLogger]


def _qualified(name: str | None) -> str:
    if not name:
        return ROOT_NAME
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return name
    return f"{ROOT_NAME}.{name}"


def resolve_logger(
    logger: logging.Logger | logging.LoggerAdapter | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> PatchLogger:
    """Pick the logger for one call: the caller's, a namespaced one, or a no-op."""
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(_qualified(name))
    # A level set by the host (or a test fixture) wins over the call's default.
    if lg.level == logging.NOTSET:
        lg.setLevel(level)
    return lg
