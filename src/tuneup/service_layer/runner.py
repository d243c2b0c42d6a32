"""Execution envelope for test bodies.

`Runner.run_protected` runs one test body between a start and a pass/fail
result, resolving fresh target/application handles for it and collecting
the failure diagnostics its options ask for. `Runner.run_all` drains a
registry through that envelope, runs each cleanup right after its test, and
finishes with the teardown body.

Nothing a test body or cleanup raises escapes the runner; the result logger
is the only place outcomes are reported.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from tuneup.domain.options import OptionSet
from tuneup.domain.outcome import Failed, Outcome, Passed, describe_exception, invoke
from tuneup.domain.title_filter import TitleFilter

if TYPE_CHECKING:
    from tuneup.domain.test_case import TestBody, TestCase
    from tuneup.interfaces.result_logger import ResultLogger
    from tuneup.interfaces.target import Application, Target, TargetProvider

    from .registry import Registry

logger = logging.getLogger(__name__)

SETUP_TITLE = "Setup"
TEARDOWN_TITLE = "Teardown"


class Runner:
    """Run test bodies and report their outcome.

    Args:
        target_provider: Resolves the local target before every body and
            cleanup.
        results: Sink for start/pass/fail/error events.
        title_filter: Restricts which titles execute; defaults to running
            everything.
    """

    def __init__(
        self,
        target_provider: TargetProvider,
        results: ResultLogger,
        title_filter: TitleFilter | None = None,
    ) -> None:
        self._target_provider = target_provider
        self._results = results
        self._title_filter = title_filter or TitleFilter()

    @property
    def results(self) -> ResultLogger:
        """Return the result logger."""
        return self._results

    @property
    def title_filter(self) -> TitleFilter:
        """Return the active title filter."""
        return self._title_filter

    def _resolve_handles(self) -> tuple[Target, Application]:
        target = self._target_provider.local_target()
        return target, target.front_most_app()

    def run_protected(
        self,
        title: str,
        body: TestBody,
        options: OptionSet | Mapping[str, bool] | None = None,
    ) -> Outcome | None:
        """Run *body* as the test *title*.

        Args:
            title: Name reported to the result logger.
            body: Callable receiving the target and application handles.
            options: Diagnostics to collect on failure; a fresh default
                OptionSet is used when omitted.

        Returns:
            The outcome of the body, or ``None`` if the title filter skipped it.
        """
        if not self._title_filter.allows(title):
            logger.debug("Skipping %r: no title pattern matches", title)
            return None

        opts = OptionSet.coerce(options) or OptionSet()

        self._results.log_start(title)
        handles = None
        try:
            handles = self._resolve_handles()
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug("Could not resolve target for %r", title, exc_info=True)
            outcome: Outcome = Failed.from_exception(exc)
        else:
            outcome = invoke(body, *handles)

        if isinstance(outcome, Passed):
            logger.debug("Test %r passed", title)
            self._results.log_pass(title)
        else:
            logger.debug("Test %r failed: %s", title, outcome.message)
            self._report_failure(title, outcome, opts, handles)
        return outcome

    def _report_failure(
        self,
        title: str,
        failure: Failed,
        options: OptionSet,
        handles: tuple[Target, Application] | None,
    ) -> None:
        self._results.log_error(failure.message)
        if options.log_stack_trace:
            self._results.log_error(failure.trace)

        if handles is not None:
            target, application = handles
            if options.log_tree:
                self._diagnose(title, "element tree", target.log_element_tree)
            if options.log_tree_json:
                self._diagnose(
                    title,
                    "element tree JSON",
                    lambda: application.main_window().log_element_tree_json(),
                )
            if options.screen_capture:
                self._diagnose(
                    title,
                    "screen capture",
                    lambda: target.capture_screen_with_name(f"{title}-fail"),
                )

        self._results.log_fail(title)

    def _diagnose(self, title: str, what: str, request: Callable[[], None]) -> None:
        """Make one diagnostic request; a failing request is reported, not raised."""
        outcome = invoke(request)
        if isinstance(outcome, Failed):
            logger.debug("Diagnostic %s failed for %r", what, title)
            self._results.log_error(
                f'Failed to collect {what} for: "{title}": {outcome.message}'
            )

    def run_cleanup(self, test_case: TestCase) -> Outcome | None:
        """Run the cleanup of *test_case*, if it has one.

        Handles are resolved fresh. A raising cleanup is reported as an error
        naming its test, followed by the trace, and never propagates.

        Returns:
            The cleanup's outcome, or ``None`` when there is no cleanup.
        """
        if test_case.cleanup is None:
            return None

        try:
            handles = self._resolve_handles()
        except Exception as exc:  # pylint: disable=broad-except
            outcome: Outcome = Failed.from_exception(exc)
        else:
            outcome = invoke(test_case.cleanup, *handles)

        if isinstance(outcome, Failed):
            logger.debug(
                "Cleanup of %r failed: %s", test_case.title, outcome.message
            )
            self._results.log_error(f'Failed to run cleanup of: "{test_case.title}"')
            self._results.log_error(outcome.trace)
        return outcome

    def run_all(self, registry: Registry, final_body: TestBody) -> None:
        """Drain *registry* and then run *final_body* as the teardown test.

        Each test is followed by its cleanup. Anything escaping the drain loop
        itself is discarded so the teardown always runs.
        """
        try:
            for test_case in registry.drain():
                self.run_protected(test_case.title, test_case.body, test_case.options)
                self.run_cleanup(test_case)
        except Exception as exc:  # pylint: disable=broad-except
            logger.debug(
                "Discarding failure while draining tests: %s",
                describe_exception(exc),
                exc_info=True,
            )

        self.run_protected(TEARDOWN_TITLE, final_body)
