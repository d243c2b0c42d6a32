"""Fixtures for tests that reconfigure the root logger."""

import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them.

    Handlers added during the test are closed so flight-recorder files are
    released.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
