"""Test script entry points.

A test script creates one `Session` (usually through
`tuneup.bootstrap.bootstrap`) and then calls::

    session.setup(prepare)             # runs now, titled "Setup"
    session.test("Sign-In", sign_in)   # queued
    session.test("Logout", logout, cleanup=reset_state, options={"logTree": False})
    session.tear_down(finish)          # runs every queued test, then "Teardown"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from tuneup.domain.options import OptionSet
from tuneup.domain.test_case import TestCase

from .registry import Registry
from .runner import SETUP_TITLE

if TYPE_CHECKING:
    from tuneup.domain.test_case import TestBody

    from .runner import Runner

logger = logging.getLogger(__name__)


class Session:
    """Registration and execution context for one test run.

    Args:
        runner: Executes test bodies.
        registry: Queue of registered tests; a new empty one by default.
    """

    def __init__(self, runner: Runner, registry: Registry | None = None) -> None:
        self.runner = runner
        self.registry = registry if registry is not None else Registry()

    @property
    def pending(self) -> int:
        """Number of tests queued and not yet run."""
        return len(self.registry)

    def setup(self, body: TestBody) -> None:
        """Run *body* immediately as the test ``"Setup"`` with default options."""
        self.runner.run_protected(SETUP_TITLE, body)

    def test(
        self,
        title: str,
        body: TestBody,
        cleanup: TestBody | None = None,
        options: OptionSet | Mapping[str, bool] | None = None,
    ) -> None:
        """Queue a test; it runs when `tear_down` is called.

        Args:
            title: Name shown when the test runs.
            body: Callable receiving the target and application.
            cleanup: Run right after *body*, even if *body* failed.
            options: An OptionSet or a mapping of partial overrides.
        """
        test_case = TestCase(title, body, cleanup, OptionSet.coerce(options))
        self.registry.add(test_case)
        logger.debug("Queued test %r (%d pending)", title, len(self.registry))

    def tear_down(self, body: TestBody) -> None:
        """Run every queued test in order, then *body* as ``"Teardown"``."""
        logger.debug("Running %d queued tests", len(self.registry))
        self.runner.run_all(self.registry, body)
