# conftest.py - pytest configuration
import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_library_loggers():
    # resolve_logger(enabled=True) sets levels on named loggers; undo that between tests.
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("applypatch"):
            logging.getLogger(name).setLevel(logging.NOTSET)
