"""Interface for the sink that records test results."""

import abc


class ResultLogger(abc.ABC):
    """Contract for recording test progress.

    For every executed test the harness emits exactly one `log_start`
    followed by exactly one of `log_pass` or `log_fail`, with any number of
    `log_error` entries in between.
    """

    @abc.abstractmethod
    def log_start(self, title: str) -> None:
        """Record that the test *title* has started."""

    @abc.abstractmethod
    def log_pass(self, title: str) -> None:
        """Record that the test *title* passed."""

    @abc.abstractmethod
    def log_fail(self, title: str) -> None:
        """Record that the test *title* failed."""

    @abc.abstractmethod
    def log_error(self, message: str) -> None:
        """Record an error message (failure description, trace, ...)."""
